"""
Sui address utilities: validation, normalization and display shortening.

A Sui address is 32 bytes rendered as "0x" followed by 64 hex characters.
Short forms such as "0x2" are accepted and zero-padded on normalization.

Reference: https://docs.sui.io/concepts/sui-move-concepts#addresses
"""

from __future__ import annotations

import re

SUI_ADDRESS_LENGTH = 32  # bytes

_HEX_RE = re.compile(r"^0x[0-9a-fA-F]+$")

SHORT_ADDRESS_CHARS = 8


class AddressError(Exception):
    """Raised for invalid Sui addresses."""

    pass


def validate_address(address: str) -> bool:
    """
    Validate a Sui address (hex prefix and length check).

    Args:
        address: Sui address string ("0x..." hex)

    Returns:
        True if valid

    Raises:
        AddressError: if the address is malformed
    """
    if not isinstance(address, str) or not address:
        raise AddressError("Address must be a non-empty string")

    if not _HEX_RE.match(address):
        raise AddressError(f"Address must be 0x-prefixed hex: {address!r}")

    digits = len(address) - 2
    if digits > SUI_ADDRESS_LENGTH * 2:
        raise AddressError(
            f"Address too long: {digits} hex digits (maximum {SUI_ADDRESS_LENGTH * 2})"
        )

    return True


def is_valid_address(address: str) -> bool:
    """
    Check if a Sui address is valid without raising exceptions.

    Returns:
        bool: True if valid, False otherwise
    """
    try:
        return validate_address(address)
    except AddressError:
        return False


def normalize_address(address: str) -> str:
    """Return the canonical lowercase, zero-padded 0x form of an address."""
    validate_address(address)
    return "0x" + address[2:].lower().rjust(SUI_ADDRESS_LENGTH * 2, "0")


def shorten_address(address: str) -> str:
    """Shorten an address for display: first 8 characters plus '...'."""
    if len(address) > SHORT_ADDRESS_CHARS:
        return address[:SHORT_ADDRESS_CHARS] + "..."
    return address
