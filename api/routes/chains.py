"""
Normalized chain listing, facets and lookups.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List
import logging

from lz_deployments.addresses import locate_address
from lz_deployments.chains import ChainDirectory
from lz_deployments.facets import build_chain_facets, build_role_facets, summarize
from lz_deployments.filters import filter_records
from lz_deployments.models import ChainRecord, FilterCriteria
from lz_deployments.types import ALL
from ..dependencies import get_records
from ..models import ChainListResponse, FacetResponse, LocateResponse, SummaryResponse

logger = logging.getLogger(__name__)
router = APIRouter()

directory = ChainDirectory()


@router.get("/chains", response_model=ChainListResponse)
async def list_chains(
    term: str = Query(""),
    chain: str = Query(ALL),
    network: str = Query(ALL),
    role: str = Query(ALL),
    records: List[ChainRecord] = Depends(get_records),
):
    """List chains matching every active filter, in upstream order."""
    criteria = FilterCriteria(term=term, chain_key=chain, network_type=network, role=role)
    filtered = filter_records(records, criteria)
    return ChainListResponse(
        data=filtered,
        criteria=criteria,
        total=len(records),
        filtered=len(filtered),
    )


@router.get("/chains/{chain_key}", response_model=ChainRecord)
async def get_chain(chain_key: str, records: List[ChainRecord] = Depends(get_records)):
    """Get one chain record."""
    for record in records:
        if record.chain_key == chain_key:
            return record
    raise HTTPException(status_code=404, detail="Chain not found")


@router.get("/facets", response_model=FacetResponse)
async def get_facets(records: List[ChainRecord] = Depends(get_records)):
    """Selector options over the full collection."""
    return FacetResponse(
        chains=build_chain_facets(records, directory.labeler(records)),
        roles=build_role_facets(records),
    )


@router.get("/summary", response_model=SummaryResponse)
async def get_summary(records: List[ChainRecord] = Depends(get_records)):
    return SummaryResponse(data=summarize(records))


@router.get("/locate/{address}", response_model=LocateResponse)
async def locate(address: str, records: List[ChainRecord] = Depends(get_records)):
    """Find the chains and roles an address is deployed as."""
    return LocateResponse(address=address, matches=locate_address(records, address))
