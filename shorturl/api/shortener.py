from fastapi import APIRouter, Depends, HTTPException, status, BackgroundTasks, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
import logging

from shorturl.core.config import settings
from shorturl.core.errors import ShortCodeError
from shorturl.db.Connection import database
from shorturl.schemas.URLInfoResponse import URLInfoResponse
from shorturl.schemas.URLCreateRequest import URLCreateRequest
from shorturl.services.codec import get_codec
from shorturl.services.shortener import URLService
from shorturl.services import RedisURLCache, metrics
from shorturl.utils.encoding import Codec

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/v1/shorten", response_model=URLInfoResponse, status_code=status.HTTP_201_CREATED)
def shorten_url_endpoint(
    url_request: URLCreateRequest,
    db: Session = Depends(database.get_db),
    codec: Codec = Depends(get_codec),
):
    original_url_str = str(url_request.original_url)
    try:
        db_url = URLService.create_short_url(db, original_url_str, codec)
    except ShortCodeError:
        raise
    except ValueError as e:
        logger.error(
            f"Failed to create short URL for {original_url_str[:50]}.. due to: {str(e)}"
        )
        raise HTTPException(status_code=409, detail=str(e))

    logger.info(
        f"API success: Shortened {db_url.original_url[:50]}... to {db_url.short_code}"
    )
    return URLInfoResponse.from_item(db_url, settings.BASE_URL)


@router.get("/{short_code}", tags=["redirect"])
def redirect_to_url_endpoint(
    short_code: str,
    request: Request,
    background_tasks: BackgroundTasks,
    db: Session = Depends(database.get_db),
    codec: Codec = Depends(get_codec),
):
    cached_url = RedisURLCache.get(short_code)
    if cached_url:
        url_id = URLService.resolve_id(short_code, codec)
        if url_id is not None:
            metrics.update_stat(request, background_tasks, db, url_id)
        return RedirectResponse(url=cached_url, status_code=status.HTTP_302_FOUND)

    db_url = URLService.get_url_by_short_code(db, short_code, codec)
    if db_url is None:
        logger.warning(f"Redirect 404: Short code not found: {short_code}")
        raise HTTPException(status_code=404, detail="URL not found")

    metrics.update_stat(request, background_tasks, db, db_url.id)
    return RedirectResponse(url=db_url.original_url, status_code=status.HTTP_302_FOUND)
