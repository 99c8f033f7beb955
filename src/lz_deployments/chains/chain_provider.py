import json
import logging
from typing import Optional, List, Dict, Iterable
from pathlib import Path

from pydantic import ValidationError

from .chain_models import ChainName
from ..facets import Labeler
from ..models import ChainRecord

logger = logging.getLogger(__name__)

DEFAULT_CHAIN_NAMES: Dict[int, str] = {
    1: "Ethereum",
    137: "Polygon",
    56: "BSC",
    43114: "Avalanche",
    250: "Fantom",
    42161: "Arbitrum",
    10: "Optimism",
    1101: "Polygon zkEVM",
    8453: "Base",
    59144: "Linea",
}


class ChainDirectory:
    """Human-readable chain names, looked up by native chain id"""

    def __init__(self, data_dir: Optional[str] = None):
        self.data_dir = Path(data_dir) if data_dir else None
        self.names: Dict[int, str] = dict(DEFAULT_CHAIN_NAMES)
        self._load_names()

    def _load_names(self):
        """Load chain_names.json (chainlist list or keyed object); entries override the defaults"""
        if self.data_dir is None:
            return

        names_file = self.data_dir / "chain_names.json"
        if not names_file.exists():
            return

        with open(names_file, 'r') as f:
            data = json.load(f)

        entries = data.values() if isinstance(data, dict) else data
        for entry in entries:
            try:
                chain = ChainName.model_validate(entry)
            except ValidationError as e:
                logger.warning(f"Skipping invalid chain name entry in {names_file}: {e}")
                continue
            self.names[chain.chainId] = chain.name

    def get_chain_name(self, chain_id: int) -> Optional[str]:
        return self.names.get(chain_id)

    def list_chain_ids(self) -> List[int]:
        return sorted(self.names)

    def label_for(self, record: ChainRecord) -> str:
        """Name a chain record by its native chain id, or a numeric key; fall back to the key"""
        chain_id = record.native_chain_id
        if chain_id is None and record.chain_key.isdigit():
            chain_id = int(record.chain_key)
        if chain_id is not None:
            name = self.get_chain_name(chain_id)
            if name:
                return name
        return record.chain_key

    def labeler(self, records: Iterable[ChainRecord]) -> Labeler:
        """Build a chain key -> label function for the facet builder"""
        labels = {record.chain_key: self.label_for(record) for record in records}
        return lambda chain_key: labels.get(chain_key, chain_key)
