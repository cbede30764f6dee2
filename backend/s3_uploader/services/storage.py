import asyncio
import logging

import boto3
from botocore.client import Config

from s3_uploader.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class StorageService:
    """S3-compatible storage backend shared by every request."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        session = boto3.session.Session()
        self.client = session.client(
            "s3",
            endpoint_url=self.settings.s3_endpoint,
            aws_access_key_id=self.settings.s3_access_key_id,
            aws_secret_access_key=self.settings.s3_secret_access_key,
            region_name=self.settings.s3_region,
            use_ssl=True,
            config=Config(signature_version="s3v4", s3={"addressing_style": "path"}),
        )
        self.bucket = self.settings.s3_bucket_name
        self.acl = self.settings.s3_upload_acl

    def public_url(self, key: str) -> str:
        endpoint = self.settings.s3_endpoint.rstrip("/")
        return f"{endpoint}/{self.bucket}/{key}"

    def create_presigned_put(self, key: str, expires_in: int) -> str:
        return self.client.generate_presigned_url(
            "put_object",
            Params={"Bucket": self.bucket, "Key": key},
            ExpiresIn=expires_in,
        )

    async def put_object(self, key: str, body: bytes, content_type: str) -> None:
        logger.info(
            "S3 put_object bucket=%s key=%s content_type=%s body_size=%d",
            self.bucket,
            key,
            content_type,
            len(body),
        )

        def _put() -> None:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
                ACL=self.acl,
            )

        await asyncio.to_thread(_put)

    async def delete_object(self, key: str) -> None:
        def _delete() -> None:
            self.client.delete_object(Bucket=self.bucket, Key=key)

        await asyncio.to_thread(_delete)
