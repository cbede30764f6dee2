from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile
from starlette.exceptions import HTTPException

from s3_uploader.api.deps import get_file_service
from s3_uploader.schemas import DeleteResponse, PresignedUrlResponse, UploadResponse
from s3_uploader.services.files import Failure, FileService, Result, Success

router = APIRouter()

UPLOAD_REQUEST_BODY = {
    "required": True,
    "content": {
        "multipart/form-data": {
            "schema": {
                "type": "object",
                "properties": {
                    "file": {
                        "type": "string",
                        "format": "binary",
                        "description": "File to upload",
                    },
                    "folder": {
                        "type": "string",
                        "description": 'Optional folder path (e.g., "documents/2024")',
                        "example": "documents/2024",
                    },
                },
                "required": ["file"],
            }
        }
    },
}


def _as_payload(result: Result) -> dict:
    payload: dict = {"success": result.success, "message": result.message}
    if isinstance(result, Success) and result.data is not None:
        payload["data"] = result.data
    return payload


@router.post(
    "/upload",
    response_model=UploadResponse,
    response_model_exclude_none=True,
    tags=["Upload"],
    summary="Upload file to S3",
    description="Upload a file to S3 storage with random hash filename generation",
    openapi_extra={"requestBody": UPLOAD_REQUEST_BODY},
)
async def upload_file(
    request: Request,
    service: FileService = Depends(get_file_service),
):
    try:
        form = await request.form()
    except HTTPException as exc:
        # Malformed multipart bodies still answer with the JSON failure shape.
        return _as_payload(Failure(message=str(exc.detail)))

    try:
        file = form.get("file")
        folder = form.get("folder")
        result = await service.upload(
            file if isinstance(file, UploadFile) else None,
            folder if isinstance(folder, str) else None,
        )
    finally:
        await form.close()
    return _as_payload(result)


@router.delete(
    "/delete/{file_name:path}",
    response_model=DeleteResponse,
    response_model_exclude_none=True,
    tags=["Delete"],
    summary="Delete file from S3",
    description="Delete a file from S3 storage by its key",
)
async def delete_file(
    file_name: str,
    service: FileService = Depends(get_file_service),
):
    result = await service.delete(file_name)
    return _as_payload(result)


@router.get(
    "/presigned-url/{file_name:path}",
    response_model=PresignedUrlResponse,
    response_model_exclude_none=True,
    tags=["Presigned URL"],
    summary="Generate presigned URL",
    description="Generate a presigned URL for uploading a file directly to S3",
)
async def presigned_url(
    file_name: str,
    service: FileService = Depends(get_file_service),
):
    result = await service.presign(file_name)
    return _as_payload(result)
