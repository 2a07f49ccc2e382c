from datetime import datetime, timezone
from fastapi import APIRouter
from pydantic import BaseModel, Field

router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


@router.get("/healthcheck", response_model=HealthResponse, tags=["health"])
async def healthcheck():
    """Simple health check endpoint."""
    return HealthResponse()
