"""
Normalization of the raw deployments document into chain records.

The metadata service returns a mapping of chain key to a loosely shaped
chain object. Every field is optional here: anything missing or of the
wrong type degrades to an empty value instead of failing the whole chain.
"""

import logging
from typing import Any, Dict, List, Optional

from .models import (
    BlockExplorer,
    ChainDetails,
    ChainRecord,
    DeploymentVersion,
    NativeCurrency,
    ValidatorInfo,
)
from .types import ContractRole

logger = logging.getLogger(__name__)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _as_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    # eids sometimes arrive as numbers
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return ""


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _normalize_details(raw: Any) -> Optional[ChainDetails]:
    if not isinstance(raw, dict):
        return None
    currency = _as_dict(raw.get("nativeCurrency"))
    return ChainDetails(
        chain_type=_as_str(raw.get("chainType")),
        chain_stack=_as_str(raw.get("chainStack")),
        chain_layer=_as_str(raw.get("chainLayer")),
        chain_status=_as_str(raw.get("chainStatus")),
        chain_key=_as_str(raw.get("chainKey")),
        native_chain_id=_as_int(raw.get("nativeChainId")),
        native_currency=NativeCurrency(
            symbol=_as_str(currency.get("symbol")),
            decimals=_as_int(currency.get("decimals")),
            name=_as_str(currency.get("name")),
            address=_as_str(currency.get("address")),
        ),
    )


def _normalize_explorers(raw: Any) -> List[BlockExplorer]:
    explorers = []
    for entry in _as_list(raw):
        url = _as_str(_as_dict(entry).get("url"))
        if url:
            explorers.append(BlockExplorer(url=url))
    return explorers


def normalize_deployment(raw: Dict[str, Any]) -> DeploymentVersion:
    """Build a deployment version, keeping only roles bound to a non-empty address"""
    addresses = {}
    for field, value in raw.items():
        role = ContractRole.from_field(field)
        if role is None:
            continue
        address = _as_dict(value).get("address")
        if isinstance(address, str) and address:
            addresses[role] = address

    return DeploymentVersion(
        endpoint_id=_as_str(raw.get("eid")),
        version=_as_int(raw.get("version")) or 0,
        stage=_as_str(raw.get("stage")),
        contract_addresses=addresses,
    )


def _normalize_deployments(chain_key: str, raw: Any) -> List[DeploymentVersion]:
    deployments: List[DeploymentVersion] = []
    seen_eids = set()
    for entry in _as_list(raw):
        if not isinstance(entry, dict):
            logger.debug(f"Skipping non-object deployment entry on {chain_key}")
            continue
        deployment = normalize_deployment(entry)
        if deployment.endpoint_id:
            if deployment.endpoint_id in seen_eids:
                logger.debug(f"Dropping duplicate eid {deployment.endpoint_id} on {chain_key}")
                continue
            seen_eids.add(deployment.endpoint_id)
        deployments.append(deployment)
    return deployments


def _normalize_validators(raw: Any) -> Dict[str, ValidatorInfo]:
    validators = {}
    for address, info in _as_dict(raw).items():
        info = _as_dict(info)
        deprecated = info.get("deprecated")
        validators[str(address)] = ValidatorInfo(
            version=_as_int(info.get("version")) or 0,
            canonical_name=_as_str(info.get("canonicalName")),
            deprecated=deprecated if isinstance(deprecated, bool) else False,
            validator_id=_as_str(info.get("id")),
        )
    return validators


def normalize_chain(chain_key: str, raw: Any) -> ChainRecord:
    """Build one chain record; malformed values yield an empty record"""
    data = _as_dict(raw)
    return ChainRecord(
        chain_key=chain_key,
        chain_details=_normalize_details(data.get("chainDetails")),
        block_explorers=_normalize_explorers(data.get("blockExplorers")),
        deployment_versions=_normalize_deployments(chain_key, data.get("deployments")),
        validators=_normalize_validators(data.get("dvns")),
    )


def normalize_deployments(raw: Any) -> List[ChainRecord]:
    """
    Convert the raw deployments document into chain records.

    Args:
        raw: Decoded JSON, expected to map chain keys to chain objects

    Returns:
        Chain records in the document's key order. Anything other than a
        mapping at the top level yields an empty list.
    """
    if not isinstance(raw, dict):
        logger.debug(f"Deployments document is {type(raw).__name__}, expected an object")
        return []

    return [normalize_chain(str(chain_key), chain_data) for chain_key, chain_data in raw.items()]
