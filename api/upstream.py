"""
Short-lived cache in front of the upstream metadata service.
"""

import asyncio
import logging
import time
from typing import Any, List, Optional, Tuple

from lz_deployments.client import DeploymentsClient
from lz_deployments.models import ChainRecord
from lz_deployments.normalizer import normalize_deployments

logger = logging.getLogger(__name__)


class UpstreamCache:
    """
    Holds the last upstream document and its normalized records for a TTL.

    Refreshes are serialized so concurrent requests share one upstream fetch.
    A failed refresh raises FetchError and leaves the cache empty or expired.
    """

    def __init__(self, client: DeploymentsClient, ttl_seconds: int = 300):
        self.client = client
        self.ttl_seconds = ttl_seconds
        self._lock = asyncio.Lock()
        self._document: Any = None
        self._records: Tuple[ChainRecord, ...] = ()
        self._fetched_at: Optional[float] = None

    def _is_fresh(self) -> bool:
        if self._fetched_at is None:
            return False
        return time.monotonic() - self._fetched_at < self.ttl_seconds

    async def _refresh(self):
        async with self._lock:
            if self._is_fresh():
                return
            document = await self.client.fetch_raw()
            self._document = document
            self._records = tuple(normalize_deployments(document))
            self._fetched_at = time.monotonic()
            logger.info(f"Fetched {len(self._records)} chains from {self.client.url}")

    async def get_document(self) -> Any:
        """The raw upstream document, fetched again once the TTL has passed"""
        if not self._is_fresh():
            await self._refresh()
        return self._document

    async def get_records(self) -> List[ChainRecord]:
        if not self._is_fresh():
            await self._refresh()
        return list(self._records)

    def invalidate(self):
        self._fetched_at = None


_upstream: Optional[UpstreamCache] = None


def initialize_upstream(url: str, timeout: float, ttl_seconds: int) -> UpstreamCache:
    global _upstream
    _upstream = UpstreamCache(DeploymentsClient(url=url, timeout=timeout), ttl_seconds=ttl_seconds)
    return _upstream


def close_upstream():
    global _upstream
    _upstream = None


def get_upstream() -> UpstreamCache:
    """Return the shared cache, creating it from settings on first use."""
    if _upstream is None:
        from .config import settings
        return initialize_upstream(settings.UPSTREAM_URL, settings.REQUEST_TIMEOUT, settings.CACHE_TTL_SECONDS)
    return _upstream
