from .models import (
    AddressMatch,
    BlockExplorer,
    CatalogSummary,
    ChainDetails,
    ChainRecord,
    DeploymentVersion,
    Facet,
    FilterCriteria,
    NativeCurrency,
    ValidatorInfo,
)
from .types import ALL, ContractRole, NetworkType
from .normalizer import normalize_deployments
from .filters import filter_records
from .facets import build_chain_facets, build_role_facets, summarize
from .addresses import locate_address, shorten_address
from .client import DeploymentsClient, DocumentFile, FetchError, load_document
from .catalog import DeploymentCatalog

__all__ = [
    "ALL",
    "AddressMatch",
    "BlockExplorer",
    "CatalogSummary",
    "ChainDetails",
    "ChainRecord",
    "ContractRole",
    "DeploymentCatalog",
    "DeploymentVersion",
    "DeploymentsClient",
    "DocumentFile",
    "Facet",
    "FetchError",
    "FilterCriteria",
    "NativeCurrency",
    "NetworkType",
    "ValidatorInfo",
    "build_chain_facets",
    "build_role_facets",
    "filter_records",
    "load_document",
    "locate_address",
    "normalize_deployments",
    "shorten_address",
    "summarize",
]
