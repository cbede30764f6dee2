import os
import sys
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from s3_uploader.core.config import get_settings
from s3_uploader.services.storage import StorageService


class DummyStorage(StorageService):
    def __init__(self) -> None:  # type: ignore[super-init-not-called]
        self.settings = get_settings()
        self.bucket = self.settings.s3_bucket_name
        self.acl = self.settings.s3_upload_acl
        self.uploads: list[tuple[str, bytes, str]] = []
        self.deleted: list[str] = []
        self.error: Exception | None = None

    def create_presigned_put(self, key: str, expires_in: int) -> str:  # type: ignore[override]
        if self.error is not None:
            raise self.error
        return f"https://example.com/put/{key}?expires={expires_in}"

    async def put_object(self, key, body, content_type):  # type: ignore[override]
        if self.error is not None:
            raise self.error
        self.uploads.append((key, body, content_type))

    async def delete_object(self, key):  # type: ignore[override]
        if self.error is not None:
            raise self.error
        self.deleted.append(key)


@pytest.fixture(scope="session", autouse=True)
def configure_environment():
    os.environ["S3_ENDPOINT"] = "https://test-endpoint.com"
    os.environ["S3_ACCESS_KEY_ID"] = "test-access-key"
    os.environ["S3_SECRET_ACCESS_KEY"] = "test-secret-key"
    os.environ["S3_REGION"] = "us-east-1"
    os.environ["S3_BUCKET_NAME"] = "test-bucket"
    os.environ["PRESIGNED_URL_EXPIRES_IN"] = "3600"
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def storage(configure_environment):
    return DummyStorage()


@pytest.fixture
def app_instance(storage):
    from s3_uploader.main import create_app

    return create_app(storage=storage)


@pytest_asyncio.fixture
async def client(app_instance):
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
