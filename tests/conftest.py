# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from wallet_account_utils.config import get_settings
from wallet_account_utils.models.account_info import AccountInfo, HardwareInfo


@pytest.fixture
def address() -> str:
    """Default 20-byte account address used by tests."""
    return "0x2d27b6e21b3d4d7c9a43fdf58f12345678907706"


@pytest.fixture
def ledger_info() -> HardwareInfo:
    """Ledger device descriptor."""
    return HardwareInfo(vendor="Ledger", path="m/44'/60'/0'/0/0", device_id="ledger-1")


@pytest.fixture
def account_factory(address: str) -> Callable[..., AccountInfo]:
    """Build AccountInfo with sensible defaults and easy overrides."""

    def _build(**overrides: Any) -> AccountInfo:
        return AccountInfo.create(
            address=overrides.pop("address", address),
            hardware=overrides.pop("hardware", False),
            name=overrides.pop("name", ""),
            kind=overrides.pop("kind", None),
            hardware_info=overrides.pop("hardware_info", None),
            is_imported=overrides.pop("is_imported", False),
        )

    return _build


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Drop the cached Settings so env changes in a test are picked up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
