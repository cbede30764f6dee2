from datetime import datetime, timezone

from fastapi import APIRouter

from s3_uploader.schemas import HealthResponse

router = APIRouter(tags=["Health"])


def utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the API is running and healthy",
)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", timestamp=utc_timestamp())
