from fastapi import Depends, Request

from s3_uploader.core.config import Settings, get_settings
from s3_uploader.services.files import FileService
from s3_uploader.services.storage import StorageService


def get_storage(request: Request) -> StorageService:
    return request.app.state.storage


def get_file_service(
    storage: StorageService = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> FileService:
    return FileService(storage, settings)
