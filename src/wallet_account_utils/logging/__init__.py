"""Logging subpackage."""

from wallet_account_utils.logging.config import configure_logging

__all__ = ["configure_logging"]
