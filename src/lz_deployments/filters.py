from typing import Iterable, List, Optional

from .models import ChainRecord, FilterCriteria
from .types import ALL


def matches_term(record: ChainRecord, term: str) -> bool:
    """Case-insensitive substring match on the chain key only"""
    if not term:
        return True
    return term.lower() in record.chain_key.lower()


def matches_chain(record: ChainRecord, chain_key: str) -> bool:
    if chain_key == ALL:
        return True
    return record.chain_key == chain_key or (
        bool(record.details_chain_key) and record.details_chain_key == chain_key
    )


def matches_network(record: ChainRecord, network_type: str) -> bool:
    if network_type == ALL:
        return True
    return record.chain_key.endswith(network_type)


def matches_role(record: ChainRecord, role: str) -> bool:
    if role == ALL:
        return True
    return any(
        deployment_role.value == role
        for deployment in record.deployment_versions
        for deployment_role in deployment.contract_addresses
    )


def matches(record: ChainRecord, criteria: FilterCriteria) -> bool:
    return (
        matches_term(record, criteria.term)
        and matches_chain(record, criteria.chain_key)
        and matches_network(record, criteria.network_type)
        and matches_role(record, criteria.role)
    )


def filter_records(
    records: Iterable[ChainRecord],
    criteria: Optional[FilterCriteria] = None,
) -> List[ChainRecord]:
    """
    Return the records satisfying every active criterion, in input order.

    Args:
        records: Normalized chain records
        criteria: Filter criteria; None means no filtering

    Returns:
        A new list, a subsequence of the input
    """
    if criteria is None:
        return list(records)
    return [record for record in records if matches(record, criteria)]
