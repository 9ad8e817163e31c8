"""
Service information endpoint.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from catalog_api.app.core.config import settings
from catalog_api.app.schemas.common import StatusResponse


router = APIRouter()


@router.get("/status", response_model=StatusResponse)
async def api_status() -> StatusResponse:
    """Report that the API is up, with its name and version."""
    return StatusResponse(
        name=settings.project_name,
        version=settings.api_version,
        status="running",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
