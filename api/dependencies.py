"""
Shared route dependencies.
"""

import logging
from typing import List

from fastapi import Depends, HTTPException

from lz_deployments.client import FetchError
from lz_deployments.models import ChainRecord
from .upstream import UpstreamCache, get_upstream

logger = logging.getLogger(__name__)


async def get_records(upstream: UpstreamCache = Depends(get_upstream)) -> List[ChainRecord]:
    """Normalized records, or 502 when the upstream service is unavailable."""
    try:
        return await upstream.get_records()
    except FetchError as e:
        logger.error(f"Error fetching deployments: {e}")
        raise HTTPException(status_code=502, detail="Failed to fetch deployments")
