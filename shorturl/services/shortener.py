from sqlalchemy.orm import Session
from shorturl.core.errors import ShortCodeError
from shorturl.db.Models.models import MAX_ID, URLItem
from shorturl.db import repository
from shorturl.utils.encoding import Codec
from typing import Optional
import logging
from shorturl.services import RedisURLCache


logger = logging.getLogger(__name__)


class URLService:

    @staticmethod
    def create_short_url(db: Session, original_url: str, codec: Codec) -> URLItem:
        # Idempotency: return existing mapping if present
        existing = repository.get_url_by_original(db, original_url)
        if existing:
            logger.info("short URL already existed : '%s' for URL: %s", existing.short_code, original_url[:50])
            return existing

        url_item = repository.create_url(db, original_url, codec)
        RedisURLCache.put(url_item.short_code, url_item.original_url)
        return url_item

    @staticmethod
    def resolve_id(short_code: str, codec: Codec) -> Optional[int]:
        try:
            url_id = codec.decode(short_code)
        except ShortCodeError as e:
            logger.info("Rejected short code %r: %s", short_code, e)
            return None

        if url_id > MAX_ID:
            logger.info("Rejected short code %r: id %d is beyond the key range", short_code, url_id)
            return None
        return url_id

    @staticmethod
    def get_url_stats(db: Session, short_code: str, codec: Codec) -> Optional[URLItem]:
        url_id = URLService.resolve_id(short_code, codec)
        if url_id is None:
            return None

        db_url = repository.get_url_by_id(db, url_id)
        # "ab" decodes like "b"; only the code we issued resolves
        if db_url is None or db_url.short_code != short_code:
            return None
        return db_url

    @staticmethod
    def get_url_by_short_code(db: Session, short_code: str, codec: Codec) -> Optional[URLItem]:
        db_url = URLService.get_url_stats(db, short_code, codec)
        if db_url:
            RedisURLCache.put(short_code, db_url.original_url)
        return db_url
