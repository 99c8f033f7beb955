import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import httpx

from .models import ChainRecord
from .normalizer import normalize_deployments

logger = logging.getLogger(__name__)

DEFAULT_DEPLOYMENTS_URL = "https://metadata.layerzero-api.com/v1/metadata/deployments"


class FetchError(Exception):
    """The deployments document could not be retrieved"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DeploymentsClient:
    def __init__(
        self,
        url: str = DEFAULT_DEPLOYMENTS_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def fetch_raw(self) -> Any:
        """
        GET the deployments document.

        Returns:
            The decoded JSON body

        Raises:
            FetchError: On transport errors, non-2xx statuses or an undecodable body
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.url, headers={"Accept": "application/json"})
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Fetching deployments from {self.url} failed: {e}")
            raise FetchError(f"Failed to fetch deployments: {e}") from e

        if not response.is_success:
            logger.warning(f"Deployments endpoint returned status {response.status_code}")
            raise FetchError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"Deployments response from {self.url} is not valid JSON: {e}")
            raise FetchError("Failed to fetch deployments: invalid JSON") from e

    async def fetch_records(self) -> List[ChainRecord]:
        """Fetch and normalize the deployments document"""
        return normalize_deployments(await self.fetch_raw())


def load_document(path: str) -> List[ChainRecord]:
    """Normalize a deployments document saved to disk"""
    try:
        with open(Path(path), 'r') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise FetchError(f"Failed to read deployments from {path}: {e}") from e
    return normalize_deployments(data)


class DocumentFile:
    """A saved deployments document, usable wherever a client is expected"""

    def __init__(self, path: str):
        self.path = path

    async def fetch_records(self) -> List[ChainRecord]:
        return load_document(self.path)
