"""
Address validators, one per network family.

The validator is chosen from the network profile's address family, never by
inspecting the address.
"""

from typing import Callable

import base58
from eth_utils import is_address

from src.domain.entities.network import AddressFamily

ACCOUNT_NAME_LENGTH = 12

DEFAULT_ADDRESS_PREFIX = "pay"
TOKEN_PREFIXES = ("token", "token_info")

BASE58_PAYLOAD_LENGTH = 25
BASE58_LEADING_CHAR = "r"


def is_valid_account_name(address: str) -> bool:
    """Fixed-length account names: only the length is checked."""
    # TODO: confirm the account-name charset (".12345a-z") before rejecting
    # names that are accepted today.
    return len(address) == ACCOUNT_NAME_LENGTH


def split_prefixed_address(address: str) -> tuple[str, str]:
    """
    Split an EIP-681 style `prefix-payload` target.
    
    Returns:
        (prefix, payload); prefix is "pay" when no separator is present.
    """
    prefix, separator, payload = address.partition("-")
    if not separator or not payload:
        return DEFAULT_ADDRESS_PREFIX, prefix
    return prefix, payload


def is_valid_hex_payload(payload: str) -> bool:
    """0x-prefixed 20-byte hex, all one case or a correct EIP-55 checksum."""
    return payload[:2] == "0x" and is_address(payload)


def is_valid_hex_address(address: str) -> bool:
    """Validate the payload of a possibly prefixed hex address."""
    _, payload = split_prefixed_address(address)
    return is_valid_hex_payload(payload)


def is_valid_base58_address(
    address: str,
    leading_char: str = BASE58_LEADING_CHAR,
    payload_length: int = BASE58_PAYLOAD_LENGTH,
) -> bool:
    """Base58check address with a fixed decoded length and leading character."""
    if not address or address != address.strip():
        return False
    try:
        data = base58.b58decode(address, alphabet=base58.BITCOIN_ALPHABET)
    except ValueError:
        return False
    return len(data) == payload_length and address[0] == leading_char


ADDRESS_VALIDATORS: dict[AddressFamily, Callable[[str], bool]] = {
    AddressFamily.ACCOUNT_NAME: is_valid_account_name,
    AddressFamily.HEX_CHECKSUM: is_valid_hex_address,
    AddressFamily.BASE58_FIXED: is_valid_base58_address,
}


def get_address_validator(family: AddressFamily) -> Callable[[str], bool]:
    """Look up the validator for an address family."""
    return ADDRESS_VALIDATORS[family]


def is_valid_address(family: AddressFamily, address: str) -> bool:
    """Validate an address with its family's rule. Non-strings are invalid."""
    if not isinstance(address, str):
        return False
    return get_address_validator(family)(address)
