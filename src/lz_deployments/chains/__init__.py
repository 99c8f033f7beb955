from .chain_provider import ChainDirectory, DEFAULT_CHAIN_NAMES
from .chain_models import ChainName

__all__ = ["ChainDirectory", "ChainName", "DEFAULT_CHAIN_NAMES"]
