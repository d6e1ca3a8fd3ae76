"""
Candidate Key Generation

Generates random Ethereum accounts for the search loop.

WARNING: Keys come straight from the operating system's CSPRNG and are not
derived from a seed phrase. Back up the printed private key; it is the only
copy.
"""

import secrets
from dataclasses import dataclass
from typing import Union

from eth_account import Account


@dataclass(frozen=True)
class Candidate:
    """One generated keypair.

    Attributes:
        identifier: Address as 40 lowercase hex nibbles, without ``0x``.
        private_key_hex: Private key as 64 lowercase hex characters, without ``0x``.
        checksum_address: EIP-55 checksummed address, with ``0x``.
    """

    identifier: str
    private_key_hex: str
    checksum_address: str


def candidate_from_key(private_key: Union[bytes, str]) -> Candidate:
    """Derive the Candidate for a given private key.

    Args:
        private_key: 32 raw bytes, or a hex string with or without ``0x``.

    Returns:
        Candidate holding the derived address and the key itself.
    """
    if isinstance(private_key, str):
        private_key = bytes.fromhex(private_key[2:] if private_key.startswith("0x") else private_key)

    account = Account.from_key(private_key)
    return Candidate(
        identifier=account.address[2:].lower(),
        private_key_hex=private_key.hex(),
        checksum_address=account.address,
    )


def generate_candidate() -> Candidate:
    """Generate a fresh random account.

    Every call draws new randomness; results must never be cached. The key
    is returned inside the Candidate so concurrent callers never share it.

    Example:
        >>> candidate = generate_candidate()
        >>> print(f"Address: 0x{candidate.identifier}")
    """
    return candidate_from_key(secrets.token_bytes(32))
