from sqlalchemy.orm import Session
from shorturl.db import repository
import logging

logger = logging.getLogger(__name__)


def record_click(db: Session, url_id: int):
        try:
                updated = repository.increment_click(db, url_id)
                if updated:
                        logger.info("metrics.record_click: DB counters updated for id %s", url_id)
        except Exception:
                db.rollback()
                logger.exception("metrics.record_click: failed to update DB for id %s", url_id)


def update_stat(request, background_tasks, db: Session, url_id: int):
    if not getattr(request.state, "metrics_scheduled", False):
        background_tasks.add_task(record_click, db, url_id)
        request.state.metrics_scheduled = True
