from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")

    s3_endpoint: str = Field(alias="S3_ENDPOINT")
    s3_access_key_id: str = Field(alias="S3_ACCESS_KEY_ID")
    s3_secret_access_key: str = Field(alias="S3_SECRET_ACCESS_KEY")
    s3_region: str = Field(default="us-east-1", alias="S3_REGION")
    s3_bucket_name: str = Field(default="kanata-s3", alias="S3_BUCKET_NAME")
    s3_upload_acl: str = Field(default="public-read", alias="S3_UPLOAD_ACL")

    presigned_url_expires_in: int = Field(default=3600, gt=0, alias="PRESIGNED_URL_EXPIRES_IN")


@lru_cache
def get_settings() -> Settings:
    return Settings()
