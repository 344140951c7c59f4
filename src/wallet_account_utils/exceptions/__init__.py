"""Exceptions subpackage."""

from wallet_account_utils.exceptions.exceptions import (
    InvalidAddressLengthError,
    WalletAccountUtilsError,
)

__all__ = [
    "InvalidAddressLengthError",
    "WalletAccountUtilsError",
]
