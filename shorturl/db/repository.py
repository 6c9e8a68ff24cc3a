from typing import List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from datetime import datetime
import logging

from shorturl.core.errors import ShortCodeError
from shorturl.db.Models.models import URLItem
from shorturl.utils.encoding import Codec

logger = logging.getLogger(__name__)


def get_url_by_id(db: Session, url_id: int) -> Optional[URLItem]:
    return db.get(URLItem, url_id)


def get_url_by_original(db: Session, original_url: str) -> Optional[URLItem]:
    return db.query(URLItem).filter(URLItem.original_url == original_url).first()


def create_url(db: Session, original_url: str, codec: Codec) -> URLItem:
    """Insert a row and derive its short code from the assigned id."""
    db_url = URLItem(original_url=original_url)
    try:
        db.add(db_url)
        db.flush()
        db_url.short_code = codec.encode(db_url.id)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(
            "IntegrityError creating URLItem original=%s: %s",
            original_url[:50], str(e)
        )
        existing = get_url_by_original(db, original_url)
        if existing:
            return existing
        raise ValueError("Failed to create URLItem")
    except ShortCodeError:
        db.rollback()
        logger.error("Could not derive a short code for %s with %r", original_url[:50], codec)
        raise

    db.refresh(db_url)
    return db_url


def list_urls(db: Session, skip: int, limit: int) -> Tuple[int, List[URLItem]]:
    total = db.query(func.count(URLItem.id)).scalar()
    urls = db.query(URLItem).order_by(URLItem.id).offset(skip).limit(limit).all()
    return total, urls


def total_clicks(db: Session) -> int:
    return db.query(func.sum(URLItem.click_count)).scalar() or 0


def increment_click(db: Session, url_id: int) -> int:
    updated = db.query(URLItem).filter(URLItem.id == url_id).update({
        URLItem.click_count: URLItem.click_count + 1,
        URLItem.last_accessed_at: datetime.utcnow()
    })
    db.commit()
    return updated
