"""Hex hash string helpers."""

import re

from ..errors import InvalidHashFormat

_NON_HEX = re.compile(r"[^0-9a-fA-F]")


def validate_hash(hash_value: str) -> str:
    """Check that every character is a hex digit.

    Returns:
        The hash unchanged.

    Raises:
        InvalidHashFormat: On the first non-hex character.
    """
    match = _NON_HEX.search(hash_value)
    if match:
        raise InvalidHashFormat(hash_value, match.start())
    return hash_value


def byte_count(hash_value: str) -> int:
    """Number of bytes a hash yields (an unpaired character is dropped)."""
    return len(hash_value) // 2
