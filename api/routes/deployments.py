"""
Raw deployments proxy.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import logging

from lz_deployments.client import FetchError
from ..upstream import UpstreamCache, get_upstream

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/deployments")
async def get_deployments(upstream: UpstreamCache = Depends(get_upstream)):
    """Forward the upstream deployments document, cached for a few minutes."""
    try:
        document = await upstream.get_document()
    except FetchError as e:
        logger.error(f"Error fetching deployments: {e}")
        return JSONResponse({"error": "Failed to fetch deployments"}, status_code=500)
    return JSONResponse(document)
