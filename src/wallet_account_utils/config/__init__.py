"""Configuration subpackage."""

from wallet_account_utils.config.config import (
    LoggingSettings,
    Settings,
    WalletSettings,
    get_settings,
)

__all__ = [
    "LoggingSettings",
    "Settings",
    "WalletSettings",
    "get_settings",
]
