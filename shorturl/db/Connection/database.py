import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from shorturl.core.config import settings
import redis
from sqlalchemy import text

SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL
logger = logging.getLogger(__name__)

connect_args = {"check_same_thread": False} if SQLALCHEMY_DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args, pool_pre_ping=True, future=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _create_redis_client():
    if not settings.REDIS_URL:
        logger.info("REDIS_URL not set, short code cache disabled")
        return None
    return redis.Redis.from_url(
        settings.REDIS_URL,
        decode_responses=True,
        max_connections=50,
        socket_connect_timeout=2,
        socket_keepalive=True,
        retry_on_timeout=True,
    )


redis_client = _create_redis_client()


def verify_redis_connection():
    if redis_client is None:
        return False
    try:
        redis_client.ping()
        logger.info("Redis connection verified")
        return True
    except redis.exceptions.ConnectionError as e:
        logger.warning(f"Redis connection failed: {e}. Service will run with degraded performance.")
        return False
    except redis.exceptions.RedisError as e:
        logger.error(f"Unexpected Redis error: {e}")
        return False


def verify_database_connection():
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection verified")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False
