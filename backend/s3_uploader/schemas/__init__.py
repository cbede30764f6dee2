from s3_uploader.schemas.files import (
    DeleteResponse,
    PresignData,
    PresignedUrlResponse,
    UploadData,
    UploadResponse,
)
from s3_uploader.schemas.health import HealthResponse

__all__ = [
    "UploadData",
    "UploadResponse",
    "DeleteResponse",
    "PresignData",
    "PresignedUrlResponse",
    "HealthResponse",
]
