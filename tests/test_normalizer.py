import pytest

from lz_deployments.models import ChainRecord
from lz_deployments.normalizer import normalize_chain, normalize_deployment, normalize_deployments
from lz_deployments.types import ContractRole, NetworkType

from .conftest import ETH_ENDPOINT_V2, LZ_LABS_DVN


def test_preserves_document_key_order(records):
    assert [r.chain_key for r in records] == [
        "ethereum-mainnet",
        "arbitrum-mainnet",
        "sepolia-testnet",
        "solana-mainnet",
    ]


def test_order_is_kept_for_unsorted_keys():
    records = normalize_deployments({"c": {}, "a": {}, "b": {}})
    assert [r.chain_key for r in records] == ["c", "a", "b"]


def test_chain_details(records):
    details = records[0].chain_details
    assert details.chain_type == "evm"
    assert details.chain_key == "ethereum"
    assert details.chain_layer == "L1"
    assert details.chain_stack == ""
    assert details.native_chain_id == 1
    assert details.native_currency.symbol == "ETH"
    assert details.native_currency.decimals == 18
    assert records[0].block_explorers[0].url == "https://etherscan.io"
    assert records[0].explorer_url == "https://etherscan.io"


def test_deployment_versions(records):
    v1, v2 = records[0].deployment_versions
    assert v1.endpoint_id == "101"
    assert v1.version == 1
    assert v1.stage == "mainnet"
    assert set(v1.contract_addresses) == {
        ContractRole.ENDPOINT,
        ContractRole.RELAYER,
        ContractRole.ULTRA_LIGHT_NODE,
        ContractRole.NONCE_CONTRACT,
    }
    assert v2.endpoint_id == "30101"
    assert v2.address_for(ContractRole.ENDPOINT_V2) == ETH_ENDPOINT_V2
    assert v2.address_for(ContractRole.RELAYER) == ""


def test_validators(records):
    validators = records[0].validators
    assert list(validators) == [LZ_LABS_DVN, "0xd56e4eab23cb81f43168f9f45211eb027b9ac7cc"]
    labs = validators[LZ_LABS_DVN]
    assert labs.canonical_name == "LayerZero Labs"
    assert labs.version == 2
    assert labs.deprecated is False
    assert labs.validator_id == "layerzero-labs"
    assert validators["0xd56e4eab23cb81f43168f9f45211eb027b9ac7cc"].deprecated is True


def test_validator_without_canonical_name():
    record = normalize_chain("x", {"dvns": {"0xdead": {"version": 2}}})
    validator = record.validators["0xdead"]
    assert validator.canonical_name == ""
    assert validator.version == 2
    assert validator.deprecated is False


def test_empty_relayer_address_is_omitted(records):
    sepolia = records[2]
    assert list(sepolia.deployment_versions[0].contract_addresses) == [ContractRole.ENDPOINT_V2]


def test_unrecognized_roles_are_ignored():
    deployment = normalize_deployment({
        "eid": "30101",
        "version": 2,
        "someFutureContract": {"address": "0x123"},
        "executor": {"address": "0x456"},
        "nonceContract": "0x789",
        "sendUln302": {"address": 42},
    })
    assert deployment.contract_addresses == {ContractRole.EXECUTOR: "0x456"}


def test_numeric_eid_and_string_version():
    deployment = normalize_deployment({"eid": 30101, "version": "2"})
    assert deployment.endpoint_id == "30101"
    assert deployment.version == 2


def test_duplicate_eids_keep_first_entry():
    record = normalize_chain("x", {"deployments": [
        {"eid": "1", "version": 1},
        {"eid": "1", "version": 2},
        {"version": 3},
        {"version": 4},
    ]})
    assert [(d.endpoint_id, d.version) for d in record.deployment_versions] == [("1", 1), ("", 3), ("", 4)]


def test_missing_fields_default_to_empty():
    record = normalize_chain("bare", {})
    assert record.chain_details is None
    assert record.block_explorers == []
    assert record.deployment_versions == []
    assert record.validators == {}
    assert record.details_chain_key == ""
    assert record.native_chain_id is None
    assert record.explorer_url == ""
    assert record.roles == []


@pytest.mark.parametrize("raw", [
    None,
    [],
    [{"chainKey": "a"}],
    "deployments",
    42,
    {},
])
def test_non_mapping_documents_yield_empty_collection(raw):
    assert normalize_deployments(raw) == []


@pytest.mark.parametrize("chain_data", [
    None,
    [],
    "oops",
    {"deployments": {"eid": "1"}},
    {"deployments": [None, "x", 3, []]},
    {"dvns": ["0xabc"]},
    {"dvns": {"0xabc": None}},
    {"chainDetails": []},
    {"chainDetails": {"nativeCurrency": "ETH", "nativeChainId": "abc"}},
    {"blockExplorers": [None, {"url": None}, "https://example.com"]},
    {"deployments": [{"eid": None, "version": None, "endpoint": None}]},
    {"deployments": [{"eid": True, "version": True}]},
])
def test_malformed_chain_data_never_raises(chain_data):
    records = normalize_deployments({"broken": chain_data, "ok": {}})
    assert [r.chain_key for r in records] == ["broken", "ok"]
    assert all(isinstance(r, ChainRecord) for r in records)


def test_network_type_is_derived_from_key(records):
    assert [r.network_type for r in records] == [
        NetworkType.MAINNET,
        NetworkType.MAINNET,
        NetworkType.TESTNET,
        NetworkType.MAINNET,
    ]
    assert normalize_chain("ethereum", {}).network_type == NetworkType.UNKNOWN


def test_scenario_document(scenario_document):
    records = normalize_deployments(scenario_document)
    assert [r.chain_key for r in records] == ["1-mainnet", "1-testnet"]
    deployment = records[0].deployment_versions[0]
    assert deployment.endpoint_id == "30101"
    assert deployment.version == 2
    assert deployment.contract_addresses == {ContractRole.ENDPOINT: "0xabc"}
    assert records[1].deployment_versions == []
