from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from botocore.exceptions import ClientError
from starlette.datastructures import UploadFile

from s3_uploader.core.config import Settings, get_settings
from s3_uploader.schemas import PresignData, UploadData
from s3_uploader.services.keys import UploadValidationError, generate_object_key
from s3_uploader.services.storage import StorageService

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class Success:
    message: str | None = None
    data: Any = None
    success: bool = True


@dataclass(frozen=True)
class Failure:
    message: str
    success: bool = False


Result = Success | Failure


def _error_message(exc: Exception, fallback: str) -> str:
    if isinstance(exc, ClientError):
        message = exc.response.get("Error", {}).get("Message")
        if message:
            return message
    return str(exc) or fallback


def _log_client_error(exc: Exception) -> None:
    if not isinstance(exc, ClientError):
        return
    error = exc.response.get("Error", {})
    metadata = exc.response.get("ResponseMetadata", {})
    logger.error(
        "S3 error details code=%s message=%s status=%s request_id=%s",
        error.get("Code"),
        error.get("Message"),
        metadata.get("HTTPStatusCode"),
        metadata.get("RequestId"),
    )


class FileService:
    """Maps upload, delete and presign requests onto storage commands.

    Every method returns a :class:`Success` or a :class:`Failure`; exceptions
    never leave this class.
    """

    def __init__(self, storage: StorageService, settings: Settings | None = None) -> None:
        self.storage = storage
        self.settings = settings or get_settings()

    async def upload(self, file: UploadFile | None, folder: str | None = None) -> Result:
        try:
            if file is None:
                raise UploadValidationError("No file provided")

            original_name = file.filename or ""
            generated = generate_object_key(original_name, folder)
            content_type = file.content_type or DEFAULT_CONTENT_TYPE

            body = await file.read()
            logger.info(
                "Upload received original_name=%s key=%s size=%d type=%s",
                original_name,
                generated.key,
                len(body),
                content_type,
            )

            await self.storage.put_object(generated.key, body, content_type)
            file_url = self.storage.public_url(generated.key)
            logger.info("Upload successful key=%s url=%s", generated.key, file_url)

            return Success(
                message="File uploaded successfully",
                data=UploadData(
                    originalName=original_name,
                    fileName=generated.key,
                    fileUrl=file_url,
                    size=len(body),
                    type=content_type,
                    randomHash=generated.random_hash,
                ),
            )
        except UploadValidationError as exc:
            logger.warning("Upload rejected: %s", exc)
            return Failure(message=str(exc))
        except Exception as exc:
            logger.exception("Upload failed")
            _log_client_error(exc)
            return Failure(message=_error_message(exc, "Upload failed"))

    async def delete(self, key: str) -> Result:
        try:
            await self.storage.delete_object(key)
        except Exception as exc:
            logger.exception("Delete failed key=%s", key)
            _log_client_error(exc)
            return Failure(message=_error_message(exc, "Delete failed"))
        logger.info("Deleted key=%s", key)
        return Success(message="File deleted successfully")

    async def presign(self, key: str) -> Result:
        expires_in = self.settings.presigned_url_expires_in
        try:
            signed_url = self.storage.create_presigned_put(key, expires_in)
        except Exception as exc:
            logger.exception("Presigned URL generation failed key=%s", key)
            _log_client_error(exc)
            return Failure(message=_error_message(exc, "Failed to generate presigned URL"))
        return Success(data=PresignData(signedUrl=signed_url, expiresIn=expires_in))
