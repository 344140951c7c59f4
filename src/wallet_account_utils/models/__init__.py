# -*- coding: utf-8 -*-
"""Domain models."""

from wallet_account_utils.models.account_info import AccountInfo, AccountKind, HardwareInfo

__all__ = [
    "AccountInfo",
    "AccountKind",
    "HardwareInfo",
]
