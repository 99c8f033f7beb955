import locale
from typing import Callable, Iterable, List, Optional

from .models import CatalogSummary, ChainRecord, Facet

Labeler = Callable[[str], str]


def _sort_key(facet: Facet):
    # strxfrm rejects NUL characters
    return (locale.strxfrm(facet.label.casefold().replace("\x00", "")), facet.label, facet.key)


def build_chain_facets(records: Iterable[ChainRecord], labeler: Optional[Labeler] = None) -> List[Facet]:
    """
    Distinct chain keys of the collection as selector options.

    Facets are sorted by label, not by source order, so the options stay
    alphabetical whatever order the metadata service returns.

    Args:
        records: The full (unfiltered) collection
        labeler: Maps a chain key to a display name; defaults to the key itself

    Returns:
        One facet per distinct chain key
    """
    facets = {}
    for record in records:
        if record.chain_key in facets:
            continue
        label = labeler(record.chain_key) if labeler else record.chain_key
        facets[record.chain_key] = Facet(key=record.chain_key, label=label or record.chain_key)
    return sorted(facets.values(), key=_sort_key)


def build_role_facets(records: Iterable[ChainRecord]) -> List[Facet]:
    """Distinct contract roles bound anywhere in the collection, sorted by name"""
    roles = {role.value for record in records for role in record.roles}
    return sorted((Facet(key=role, label=role) for role in roles), key=_sort_key)


def summarize(records: Iterable[ChainRecord]) -> CatalogSummary:
    records = list(records)
    return CatalogSummary(
        total_chains=len(records),
        networks=len(build_chain_facets(records)),
        contracts=len(build_role_facets(records)),
        deployments=sum(len(record.deployment_versions) for record in records),
        validators=sum(len(record.validators) for record in records),
    )
