"""AccountInfo: read-only view of a wallet account as seen by the UI helpers.

Owned by the account-management layer; helpers here only read `address`
and `hardware`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AccountKind(str, Enum):
    """How the account's key material is held."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    LEDGER = "ledger"
    TREZOR = "trezor"


_VENDOR_KINDS: dict[str, AccountKind] = {
    "ledger": AccountKind.LEDGER,
    "trezor": AccountKind.TREZOR,
}


@dataclass(frozen=True, slots=True)
class HardwareInfo:
    """Signing device backing a hardware account."""

    vendor: str
    """Device vendor, e.g. "Ledger" or "Trezor"."""
    path: str
    """Derivation path of the account on the device (e.g. m/44'/60'/0'/0/0)."""
    device_id: str
    """Vendor-specific device identifier."""


@dataclass(frozen=True, slots=True)
class AccountInfo:
    """Wallet account record.

    `address` is kept exactly as given: no trimming, no case normalisation.
    """

    address: str
    """Hex account address (0x...)."""
    hardware: bool
    """True when the key lives on a hardware signing device."""
    name: str = ""
    """Display name."""
    kind: AccountKind = AccountKind.PRIMARY
    hardware_info: HardwareInfo | None = None
    is_imported: bool = False

    @classmethod
    def create(
        cls,
        address: str,
        *,
        hardware: bool = False,
        name: str = "",
        kind: AccountKind | None = None,
        hardware_info: HardwareInfo | None = None,
        is_imported: bool = False,
    ) -> AccountInfo:
        """Create an account record.

        A record with hardware_info is always a hardware account; when kind is
        omitted it is taken from the device vendor (falls back to PRIMARY).
        """
        if not address:
            raise ValueError("address must be non-empty")
        if hardware_info is not None:
            hardware = True
        if kind is None:
            kind = AccountKind.PRIMARY
            if hardware_info is not None:
                kind = _VENDOR_KINDS.get(hardware_info.vendor.lower(), AccountKind.PRIMARY)
        return cls(
            address=address,
            hardware=hardware,
            name=name,
            kind=kind,
            hardware_info=hardware_info,
            is_imported=is_imported,
        )
