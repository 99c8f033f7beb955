"""
Health check endpoint.
"""

from fastapi import APIRouter, Depends
from datetime import datetime, timezone

from ..models import HealthResponse
from ..upstream import UpstreamCache, get_upstream

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(upstream: UpstreamCache = Depends(get_upstream)):
    """Health check."""
    try:
        await upstream.get_document()
        upstream_status = "connected"
    except Exception as e:
        upstream_status = f"error: {str(e)}"

    return HealthResponse(
        status="healthy" if upstream_status == "connected" else "degraded",
        timestamp=datetime.now(timezone.utc),
        upstream=upstream_status
    )
