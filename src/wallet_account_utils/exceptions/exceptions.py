"""Custom exceptions for wallet account helpers."""

from __future__ import annotations

from typing import Any


class WalletAccountUtilsError(Exception):
    """Base exception for wallet account helper errors."""

    pass


class InvalidAddressLengthError(WalletAccountUtilsError, ValueError):
    """Raised when an expected address byte length is negative or not an int.

    A malformed address is never an error (validators return False); a bad
    length argument is a caller bug.
    """

    def __init__(self, length: Any, message: str | None = None) -> None:
        super().__init__(
            message or f"address length must be a non-negative int, got {length!r}"
        )
        self.length = length
