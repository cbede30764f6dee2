from pydantic import BaseModel, Field


class UploadData(BaseModel):
    originalName: str = Field(..., description="Original filename")
    fileName: str = Field(..., description="Hashed key used in the bucket")
    fileUrl: str = Field(..., description="Public URL of the uploaded file")
    size: int = Field(..., description="File size in bytes")
    type: str = Field(..., description="MIME type declared for the file")
    randomHash: str = Field(..., description="32-character random hash used for the key")


class UploadResponse(BaseModel):
    success: bool
    message: str
    data: UploadData | None = None


class DeleteResponse(BaseModel):
    success: bool
    message: str


class PresignData(BaseModel):
    signedUrl: str = Field(..., description="Presigned URL for file upload")
    expiresIn: int = Field(..., description="URL expiration time in seconds")


class PresignedUrlResponse(BaseModel):
    success: bool
    message: str | None = None
    data: PresignData | None = None
