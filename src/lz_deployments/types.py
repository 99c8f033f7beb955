from enum import Enum

ALL = "all"


class ContractRole(str, Enum):
    """Contract roles a deployment version can bind to an address.

    Values are the field names used by the metadata service.
    """
    ENDPOINT = "endpoint"
    ENDPOINT_V2 = "endpointV2"
    ENDPOINT_VIEW = "endpointV2View"
    RELAYER = "relayerV2"
    ULTRA_LIGHT_NODE = "ultraLightNodeV2"
    SEND_LIB_301 = "sendUln301"
    RECEIVE_LIB_301 = "receiveUln301"
    SEND_LIB = "sendUln302"
    RECEIVE_LIB = "receiveUln302"
    NONCE_CONTRACT = "nonceContract"
    EXECUTOR = "executor"
    LZ_EXECUTOR = "lzExecutor"
    BLOCKED_MESSAGE_LIB = "blockedMessageLib"
    DEAD_DVN = "deadDVN"

    @classmethod
    def from_field(cls, name: str) -> "ContractRole | None":
        try:
            return cls(name)
        except ValueError:
            return None


class NetworkType(str, Enum):
    """Network type encoded as a chain key suffix"""
    MAINNET = "mainnet"
    TESTNET = "testnet"
    UNKNOWN = "unknown"

    @classmethod
    def from_chain_key(cls, chain_key: str) -> "NetworkType":
        for network in (cls.MAINNET, cls.TESTNET):
            if chain_key.endswith(network.value):
                return network
        return cls.UNKNOWN
