"""
Address helpers: display shortening and reverse lookup of deployed addresses.
"""

from typing import Iterable, List
from web3 import Web3

from .models import AddressMatch, ChainRecord


def shorten_address(address: str) -> str:
    """
    Shorten an address for display as `0x1234...abcd`.

    Addresses too short to benefit are returned unchanged.
    """
    if len(address) <= 13:
        return address
    return f"{address[:6]}...{address[-4:]}"


def canonical_address(address: str) -> str:
    """Checksum form for EVM addresses; anything else (Solana, Aptos, ...) unchanged"""
    if Web3.is_address(address):
        return Web3.to_checksum_address(address)
    return address


def locate_address(records: Iterable[ChainRecord], address: str) -> List[AddressMatch]:
    """
    Find every contract role and validator bound to an address.

    EVM addresses compare regardless of checksum casing.

    Args:
        records: Chain records to search
        address: Address to look for

    Returns:
        Matches in collection order, contract roles before validators per chain
    """
    if not address:
        return []

    target = canonical_address(address)
    found: List[AddressMatch] = []

    for record in records:
        for deployment in record.deployment_versions:
            for role, bound in deployment.contract_addresses.items():
                if canonical_address(bound) == target:
                    found.append(AddressMatch(
                        chain_key=record.chain_key,
                        address=bound,
                        role=role,
                        endpoint_id=deployment.endpoint_id,
                        version=deployment.version,
                    ))
        for validator_address, validator in record.validators.items():
            if canonical_address(validator_address) == target:
                found.append(AddressMatch(
                    chain_key=record.chain_key,
                    address=validator_address,
                    version=validator.version,
                    validator_name=validator.canonical_name,
                ))

    return found
