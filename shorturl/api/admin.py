from shorturl.db.Connection import database
from shorturl.services.codec import get_codec
from shorturl.services.shortener import URLService
from shorturl.utils.encoding import Codec
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
import logging

from shorturl.db import repository
from shorturl.schemas.URLInfoResponse import URLInfoResponse
from shorturl.schemas.PaginatedURLList import PaginatedURLList
from shorturl.core.config import settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/list", response_model=PaginatedURLList)
def list_urls_endpoint(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(database.get_db)
):
    """
    Paginated listing of all shortened URLs, oldest first.
    """
    logger.info(f"Admin accessed URL list: skip={skip}, limit={limit}")
    total, urls = repository.list_urls(db, skip, limit)
    return PaginatedURLList(
        total=total,
        skip=skip,
        limit=limit,
        urls=[URLInfoResponse.from_item(u, settings.BASE_URL) for u in urls]
    )


@router.get("/analytics/total_clicks", response_model=dict)
def get_total_clicks(db: Session = Depends(database.get_db)):
    return {"total_clicks": repository.total_clicks(db)}


@router.get("/stats/{short_code}", response_model=URLInfoResponse)
def get_url_statistics_endpoint(
    short_code: str,
    db: Session = Depends(database.get_db),
    codec: Codec = Depends(get_codec),
):
    db_url = URLService.get_url_stats(db, short_code, codec)
    if db_url is None:
        logger.warning(f"Stats 404: Short code not found: {short_code}")
        raise HTTPException(status_code=404, detail="URL not found")
    return URLInfoResponse.from_item(db_url, settings.BASE_URL)
