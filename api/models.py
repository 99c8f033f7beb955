"""
Response models for the deployments API.
"""

from typing import List
from datetime import datetime
from pydantic import BaseModel

from lz_deployments.models import AddressMatch, CatalogSummary, ChainRecord, Facet, FilterCriteria


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: datetime
    upstream: str


class ChainListResponse(BaseModel):
    """Filtered chain listing."""
    data: List[ChainRecord]
    criteria: FilterCriteria
    total: int
    filtered: int


class FacetResponse(BaseModel):
    """Selector options, computed over the full collection."""
    chains: List[Facet]
    roles: List[Facet]


class SummaryResponse(BaseModel):
    data: CatalogSummary


class LocateResponse(BaseModel):
    address: str
    matches: List[AddressMatch]
