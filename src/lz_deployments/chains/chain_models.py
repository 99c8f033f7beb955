from typing import Optional
from pydantic import BaseModel


class ChainName(BaseModel):
    """A chainlist-style entry; only the fields used for labelling are required"""
    chainId: int
    name: str
    shortName: Optional[str] = None
    isTestnet: Optional[bool] = None

    class Config:
        extra = "allow"
