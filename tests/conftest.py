import copy
import json

import pytest

ETH_ENDPOINT_V2 = "0x1a44076050125825900e736c501f859c50fe728c"
LZ_LABS_DVN = "0x589dedbd617e0cbcb916a9223f4d1300c294236b"

DEPLOYMENTS_DOCUMENT = {
    "ethereum-mainnet": {
        "blockExplorers": [{"url": "https://etherscan.io"}],
        "chainDetails": {
            "chainType": "evm",
            "chainKey": "ethereum",
            "chainLayer": "L1",
            "nativeChainId": 1,
            "nativeCurrency": {"symbol": "ETH", "decimals": 18, "name": "Ether"},
        },
        "deployments": [
            {
                "eid": "101",
                "version": 1,
                "stage": "mainnet",
                "endpoint": {"address": "0x66a71dcef29a0ffbdbe3c6a460a3b5bc225cd675"},
                "relayerV2": {"address": "0x902f09715b6303d4173037652fa7377e5b2e8f6b"},
                "ultraLightNodeV2": {"address": "0x4d73adb72bc3dd368966edd0f0b2148401a178e2"},
                "nonceContract": {"address": "0x5b905fe05f81f3a8ad8b28c6e17779cfabf76068"},
            },
            {
                "eid": "30101",
                "version": 2,
                "stage": "mainnet",
                "endpointV2": {"address": ETH_ENDPOINT_V2},
                "sendUln302": {"address": "0xbb2ea70c9e858123480642cf96acbcce1372dce1"},
                "receiveUln302": {"address": "0xc02ab410f0734efa3f14628780e6e695156024c2"},
                "executor": {"address": "0x173272739bd7aa6e4e214714048a9fe699453059"},
            },
        ],
        "dvns": {
            LZ_LABS_DVN: {"version": 2, "canonicalName": "LayerZero Labs", "id": "layerzero-labs"},
            "0xd56e4eab23cb81f43168f9f45211eb027b9ac7cc": {
                "version": 2,
                "canonicalName": "Google Cloud",
                "deprecated": True,
            },
        },
    },
    "arbitrum-mainnet": {
        "chainDetails": {"chainType": "evm", "chainKey": "arbitrum", "chainLayer": "L2", "nativeChainId": 42161},
        "deployments": [
            {
                "eid": "30110",
                "version": 2,
                "endpointV2": {"address": ETH_ENDPOINT_V2},
                "executor": {"address": "0x31cae3b7fb82d847621859fb1585353c5720660d"},
            },
        ],
        "dvns": {},
    },
    "sepolia-testnet": {
        "chainDetails": {"chainType": "evm", "chainKey": "sepolia", "nativeChainId": 11155111},
        "deployments": [
            {
                "eid": "40161",
                "version": 2,
                "endpointV2": {"address": "0x6edce65403992e310a62460808c4b910d972f10f"},
                "relayerV2": {"address": ""},
            },
        ],
    },
    "solana-mainnet": {
        "chainDetails": {
            "chainType": "solana",
            "chainKey": "solana",
            "nativeCurrency": {"symbol": "SOL", "decimals": 9},
        },
        "deployments": [
            {"eid": "30168", "version": 2, "endpointV2": {"address": "76y77prsiCMvXMjuoZ5VRrhG5qYBrUMYTE5WgHqgjEn6"}},
        ],
    },
}

SCENARIO_DOCUMENT = {
    "1-mainnet": {
        "chainKey": "1-mainnet",
        "deployments": [{"eid": "30101", "version": 2, "endpoint": {"address": "0xabc"}}],
        "dvns": {},
    },
    "1-testnet": {"chainKey": "1-testnet", "deployments": [], "dvns": {}},
}


@pytest.fixture
def document():
    return copy.deepcopy(DEPLOYMENTS_DOCUMENT)


@pytest.fixture
def scenario_document():
    return copy.deepcopy(SCENARIO_DOCUMENT)


@pytest.fixture
def records(document):
    from lz_deployments.normalizer import normalize_deployments
    return normalize_deployments(document)


@pytest.fixture
def document_file(tmp_path, document):
    path = tmp_path / "deployments.json"
    path.write_text(json.dumps(document))
    return str(path)
