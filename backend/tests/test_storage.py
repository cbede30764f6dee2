import pytest
from botocore.exceptions import ClientError
from botocore.stub import Stubber

from s3_uploader.core.config import Settings
from s3_uploader.services.storage import StorageService


@pytest.fixture
def s3_storage():
    settings = Settings(
        S3_ENDPOINT="https://test-endpoint.com/",
        S3_ACCESS_KEY_ID="test-access-key",
        S3_SECRET_ACCESS_KEY="test-secret-key",
        S3_BUCKET_NAME="test-bucket",
    )
    return StorageService(settings)


def test_public_url_joins_endpoint_bucket_and_key(s3_storage):
    assert (
        s3_storage.public_url("documents/2024/abc.pdf")
        == "https://test-endpoint.com/test-bucket/documents/2024/abc.pdf"
    )


@pytest.mark.asyncio
async def test_put_object_sends_public_read_acl(s3_storage):
    with Stubber(s3_storage.client) as stubber:
        stubber.add_response(
            "put_object",
            {},
            {
                "Bucket": "test-bucket",
                "Key": "abc.png",
                "Body": b"data",
                "ContentType": "image/png",
                "ACL": "public-read",
            },
        )
        await s3_storage.put_object("abc.png", b"data", "image/png")
        stubber.assert_no_pending_responses()


@pytest.mark.asyncio
async def test_delete_object(s3_storage):
    with Stubber(s3_storage.client) as stubber:
        stubber.add_response("delete_object", {}, {"Bucket": "test-bucket", "Key": "a/b.txt"})
        await s3_storage.delete_object("a/b.txt")
        stubber.assert_no_pending_responses()


@pytest.mark.asyncio
async def test_delete_object_propagates_client_error(s3_storage):
    with Stubber(s3_storage.client) as stubber:
        stubber.add_client_error("delete_object", service_error_code="NoSuchBucket")
        with pytest.raises(ClientError):
            await s3_storage.delete_object("a/b.txt")


def test_presigned_put_uses_path_style_and_expiry(s3_storage):
    url = s3_storage.create_presigned_put("documents/report.pdf", 3600)
    assert url.startswith("https://test-endpoint.com/test-bucket/documents/report.pdf?")
    assert "X-Amz-Expires=3600" in url
    assert "X-Amz-Signature=" in url
