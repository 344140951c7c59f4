"""Validation helpers for hex addresses."""

from __future__ import annotations

import re
from typing import Any

from wallet_account_utils.config import get_settings
from wallet_account_utils.exceptions import InvalidAddressLengthError

_HEX_ADDRESS_RE = re.compile(r"0x[0-9A-Fa-f]*")


def _check_length(length: Any) -> int:
    # bool is an int subclass; True as a byte length is a caller bug.
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise InvalidAddressLengthError(length)
    return length


def is_valid_address(value: Any, length: int) -> bool:
    """Return True if value is 0x followed by exactly `length` bytes of hex.

    Format only: no checksum or case rules, no trimming. "0x" alone is a
    valid zero-length address. Non-str values are not addresses.

    Raises:
        InvalidAddressLengthError: length is negative or not an int.
    """
    length = _check_length(length)
    if not isinstance(value, str):
        return False
    if _HEX_ADDRESS_RE.fullmatch(value) is None:
        return False
    return len(value) == 2 + 2 * length


def is_valid_account_address(value: Any) -> bool:
    """Return True if value is a well-formed account address of the configured byte length."""
    return is_valid_address(value, get_settings().wallet.address_byte_length)


def mask_address(addr: str | None) -> str:
    """Return a masked wallet address for logging (e.g. 0x1234...abcd)."""
    if not addr or len(addr) < 10:
        return "***"
    return f"{addr[:6]}...{addr[-4:]}"
