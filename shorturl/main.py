from contextlib import asynccontextmanager
from shorturl.db.Connection import database
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from shorturl.core.config import settings
from shorturl.core.errors import ConfigurationError, ShortCodeError
from shorturl.db.Models import models
from shorturl.api import shortener, admin, codec
from shorturl.core.logging_config import configure_logging
from shorturl.services.codec import get_codec

logger = configure_logging()
logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")

models.Base.metadata.create_all(bind=database.engine)
logger.info("Database models initialized/checked.")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A bad CODEC_* setting stops startup instead of failing every request
    get_codec()
    database.verify_database_connection()
    database.verify_redis_connection()
    yield
    logger.info("Shutting down gracefully...")
    database.engine.dispose()
    if database.redis_client is not None:
        database.redis_client.close()


# Every fixed route lives under /api so no short code can collide with one
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="URL shortener deriving short codes from row ids",
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)


@app.get("/api/v1/health", tags=["health"])
def health_check():
    return {"status": "healthy", "service": "url-shortener"}


@app.get("/api/v1/ready", tags=["health"])
def readiness():
    details = {"db": "ok" if database.verify_database_connection() else "error"}
    if database.redis_client is None:
        details["redis"] = "disabled"
    else:
        details["redis"] = "ok" if database.verify_redis_connection() else "error"

    try:
        get_codec()
        details["codec"] = "ok"
    except ConfigurationError as e:
        logger.error(f"Codec configuration invalid: {e}")
        details["codec"] = "error"

    ready = details["db"] == "ok" and details["redis"] != "error" and details["codec"] == "ok"
    return {"ready": ready, "details": details}


app.include_router(admin.router, prefix="/api/v1")
app.include_router(codec.router, prefix="/api/v1")
app.include_router(shortener.router, prefix="")


@app.exception_handler(ConfigurationError)
async def configuration_exception_handler(request: Request, exc: ConfigurationError):
    logger.error(f"Codec misconfigured while serving {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": "Internal server error"})


@app.exception_handler(ShortCodeError)
async def short_code_exception_handler(request: Request, exc: ShortCodeError):
    logger.warning(f"Short code error on {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
