# -*- coding: utf-8 -*-
"""Utility modules."""

from wallet_account_utils.utils.accounts import find_hardware_account_info
from wallet_account_utils.utils.validation import (
    is_valid_account_address,
    is_valid_address,
    mask_address,
)

__all__ = [
    "find_hardware_account_info",
    "is_valid_account_address",
    "is_valid_address",
    "mask_address",
]
