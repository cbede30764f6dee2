import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from s3_uploader.api.routers import files as files_router
from s3_uploader.api.routers import health as health_router
from s3_uploader.api.routers import pages as pages_router
from s3_uploader.core.config import get_settings
from s3_uploader.services.storage import StorageService

logger = logging.getLogger(__name__)

DESCRIPTION = (
    "API untuk upload, delete, dan generate presigned URL untuk S3 storage "
    "dengan random hash filename generation"
)

OPENAPI_TAGS = [
    {"name": "Upload", "description": "File upload operations"},
    {"name": "Delete", "description": "File deletion operations"},
    {"name": "Presigned URL", "description": "Presigned URL generation"},
    {"name": "Health", "description": "Health check endpoint"},
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(
        "S3 uploader running at %s:%s bucket=%s endpoint=%s",
        settings.host,
        settings.port,
        settings.s3_bucket_name,
        settings.s3_endpoint,
    )
    yield


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(storage: StorageService | None = None) -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)
    app = FastAPI(
        debug=settings.debug,
        title="S3 Uploader API",
        version="1.0.0",
        description=DESCRIPTION,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.state.storage = storage or StorageService(settings)

    app.include_router(pages_router.router)
    app.include_router(files_router.router)
    app.include_router(health_router.router)

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
