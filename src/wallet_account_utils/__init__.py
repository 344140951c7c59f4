"""Wallet account helpers: address format validation and hardware account lookup."""

from wallet_account_utils.config import get_settings
from wallet_account_utils.models import AccountInfo, AccountKind, HardwareInfo
from wallet_account_utils.utils import (
    find_hardware_account_info,
    is_valid_account_address,
    is_valid_address,
    mask_address,
)

__version__ = "0.0.1"
__all__ = [
    "AccountInfo",
    "AccountKind",
    "HardwareInfo",
    "find_hardware_account_info",
    "get_settings",
    "is_valid_account_address",
    "is_valid_address",
    "mask_address",
]
