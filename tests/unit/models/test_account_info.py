# -*- coding: utf-8 -*-
"""Unit tests for AccountInfo construction rules."""

from __future__ import annotations

import dataclasses

import pytest

from wallet_account_utils.models.account_info import AccountInfo, AccountKind, HardwareInfo


def test_create_raises_when_address_is_empty() -> None:
    with pytest.raises(ValueError, match="address must be non-empty"):
        AccountInfo.create("")


def test_create_defaults_to_primary_software_account(address: str) -> None:
    account = AccountInfo.create(address)

    assert account.address == address
    assert account.hardware is False
    assert account.kind == AccountKind.PRIMARY
    assert account.hardware_info is None
    assert account.is_imported is False
    assert account.name == ""


def test_create_keeps_address_verbatim() -> None:
    account = AccountInfo.create(" 0xABcd ")

    assert account.address == " 0xABcd "


def test_create_with_hardware_info_forces_hardware_flag(
    address: str,
    ledger_info: HardwareInfo,
) -> None:
    account = AccountInfo.create(address, hardware=False, hardware_info=ledger_info)

    assert account.hardware is True
    assert account.hardware_info == ledger_info


@pytest.mark.parametrize(
    ("vendor", "kind"),
    [
        ("Ledger", AccountKind.LEDGER),
        ("trezor", AccountKind.TREZOR),
        ("Acme", AccountKind.PRIMARY),
    ],
)
def test_create_derives_kind_from_vendor(address: str, vendor: str, kind: AccountKind) -> None:
    info = HardwareInfo(vendor=vendor, path="m/44'/60'/0'/0/1", device_id="dev")

    assert AccountInfo.create(address, hardware_info=info).kind == kind


def test_create_explicit_kind_wins_over_vendor(address: str, ledger_info: HardwareInfo) -> None:
    account = AccountInfo.create(
        address, kind=AccountKind.SECONDARY, hardware_info=ledger_info
    )

    assert account.kind == AccountKind.SECONDARY


def test_create_hardware_without_device_info(address: str) -> None:
    account = AccountInfo.create(address, hardware=True)

    assert account.hardware is True
    assert account.hardware_info is None


def test_account_info_is_frozen(address: str) -> None:
    account = AccountInfo.create(address)

    with pytest.raises(dataclasses.FrozenInstanceError):
        account.hardware = True  # type: ignore[misc]


def test_account_kind_is_string_valued() -> None:
    assert AccountKind("ledger") is AccountKind.LEDGER
    assert AccountKind.TREZOR.value == "trezor"
