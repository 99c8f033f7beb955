"""
Catalog state exposed to presentation layers (CLI, API).

Holds the last successfully fetched collection and the current filter
criteria. The filtered view and facets are recomputed from those on every
access and never cached.
"""

import logging
from typing import List, Optional, Protocol, Tuple

from .chains import ChainDirectory
from .client import FetchError
from .facets import build_chain_facets, build_role_facets, summarize
from .filters import filter_records
from .models import CatalogSummary, ChainRecord, Facet, FilterCriteria

logger = logging.getLogger(__name__)

CRITERIA_ALIASES = {
    "chain": "chain_key",
    "chainKey": "chain_key",
    "network": "network_type",
    "networkType": "network_type",
}


class RecordSource(Protocol):
    async def fetch_records(self) -> List[ChainRecord]:
        ...


class DeploymentCatalog:
    def __init__(self, source: RecordSource, directory: Optional[ChainDirectory] = None):
        self.source = source
        self.directory = directory
        self.criteria = FilterCriteria()
        self.error: Optional[str] = None
        self.loading = False
        self._records: Tuple[ChainRecord, ...] = ()
        self._last_fetch_failed = False

    async def refresh(self) -> bool:
        """
        Fetch and publish a new collection.

        On failure the previous collection is kept, unless the previous
        fetch had failed as well, in which case it is discarded.

        Returns:
            True if a new collection was published
        """
        if self.loading:
            logger.debug("Refresh already in progress")
            return False

        self.loading = True
        try:
            records = await self.source.fetch_records()
        except FetchError as e:
            logger.error(f"Error fetching deployments: {e}")
            if self._last_fetch_failed:
                self._records = ()
            self._last_fetch_failed = True
            self.error = str(e)
            return False
        finally:
            self.loading = False

        self._records = tuple(records)
        self._last_fetch_failed = False
        self.error = None
        logger.info(f"Loaded {len(self._records)} chain records")
        return True

    @property
    def records(self) -> List[ChainRecord]:
        return list(self._records)

    @property
    def filtered(self) -> List[ChainRecord]:
        return filter_records(self._records, self.criteria)

    @property
    def facets(self) -> List[Facet]:
        records = self._records
        labeler = self.directory.labeler(records) if self.directory else None
        return build_chain_facets(records, labeler)

    @property
    def role_facets(self) -> List[Facet]:
        return build_role_facets(self._records)

    @property
    def summary(self) -> CatalogSummary:
        return summarize(self._records)

    def apply(self, criteria: Optional[FilterCriteria] = None, **changes) -> List[ChainRecord]:
        """Replace or update the criteria and return the recomputed filtered view"""
        if criteria is not None:
            self.criteria = criteria
        if changes:
            update = {}
            for name, value in changes.items():
                field = CRITERIA_ALIASES.get(name, name)
                if field not in FilterCriteria.model_fields:
                    raise TypeError(f"Unknown filter criterion: {name}")
                update[field] = value
            self.criteria = self.criteria.model_copy(update=update)
        return self.filtered

    def clear_filters(self) -> List[ChainRecord]:
        return self.apply(FilterCriteria())

    def get(self, chain_key: str) -> Optional[ChainRecord]:
        for record in self._records:
            if record.chain_key == chain_key:
                return record
        return None
