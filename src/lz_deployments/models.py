from typing import Optional, List, Dict
from pydantic import BaseModel, Field, AliasChoices
from .types import ALL, ContractRole, NetworkType


class NativeCurrency(BaseModel):
    symbol: str = ""
    decimals: Optional[int] = None
    name: str = ""
    address: str = ""

    class Config:
        frozen = True


class ChainDetails(BaseModel):
    chain_type: str = ""
    chain_stack: str = ""
    chain_layer: str = ""
    chain_status: str = ""
    chain_key: str = ""
    native_chain_id: Optional[int] = None
    native_currency: NativeCurrency = Field(default_factory=NativeCurrency)

    class Config:
        frozen = True


class BlockExplorer(BaseModel):
    url: str

    class Config:
        frozen = True


class DeploymentVersion(BaseModel):
    """One protocol version deployed on a chain"""
    endpoint_id: str = ""
    version: int = 0
    stage: str = ""
    contract_addresses: Dict[ContractRole, str] = Field(default_factory=dict)

    class Config:
        frozen = True

    def address_for(self, role: ContractRole) -> str:
        return self.contract_addresses.get(role, "")


class ValidatorInfo(BaseModel):
    """A DVN registered on a chain, keyed by its address in the owning record"""
    version: int = 0
    canonical_name: str = ""
    deprecated: bool = False
    validator_id: str = ""

    class Config:
        frozen = True


class ChainRecord(BaseModel):
    chain_key: str
    chain_details: Optional[ChainDetails] = None
    block_explorers: List[BlockExplorer] = Field(default_factory=list)
    deployment_versions: List[DeploymentVersion] = Field(default_factory=list)
    validators: Dict[str, ValidatorInfo] = Field(default_factory=dict)

    class Config:
        frozen = True

    @property
    def network_type(self) -> NetworkType:
        return NetworkType.from_chain_key(self.chain_key)

    @property
    def details_chain_key(self) -> str:
        return self.chain_details.chain_key if self.chain_details else ""

    @property
    def native_chain_id(self) -> Optional[int]:
        return self.chain_details.native_chain_id if self.chain_details else None

    @property
    def explorer_url(self) -> str:
        """First block explorer URL, if any"""
        return self.block_explorers[0].url if self.block_explorers else ""

    @property
    def roles(self) -> List[ContractRole]:
        """Distinct roles bound by any deployment version, in first-seen order"""
        seen: List[ContractRole] = []
        for deployment in self.deployment_versions:
            for role in deployment.contract_addresses:
                if role not in seen:
                    seen.append(role)
        return seen

    def get_deployment(self, endpoint_id: str) -> Optional[DeploymentVersion]:
        for deployment in self.deployment_versions:
            if deployment.endpoint_id == endpoint_id:
                return deployment
        return None


class FilterCriteria(BaseModel):
    """Criteria for narrowing the chain listing.

    "all" (or an empty term) leaves a criterion inactive.
    """
    term: str = ""
    chain_key: str = Field(default=ALL, validation_alias=AliasChoices("chain_key", "chainKey", "chain"))
    network_type: str = Field(default=ALL, validation_alias=AliasChoices("network_type", "networkType", "network"))
    role: str = ALL

    class Config:
        frozen = True

    @property
    def is_active(self) -> bool:
        return bool(self.term) or any(
            value != ALL for value in (self.chain_key, self.network_type, self.role)
        )


class Facet(BaseModel):
    key: str
    label: str

    class Config:
        frozen = True


class CatalogSummary(BaseModel):
    total_chains: int = 0
    networks: int = 0
    contracts: int = 0
    deployments: int = 0
    validators: int = 0


class AddressMatch(BaseModel):
    """Where an address appears in the catalog"""
    chain_key: str
    address: str
    role: Optional[ContractRole] = None  # None for validator matches
    endpoint_id: str = ""
    version: int = 0
    validator_name: str = ""
