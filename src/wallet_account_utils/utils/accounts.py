# -*- coding: utf-8 -*-
"""Lookup helpers over account collections."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Optional

import structlog

from wallet_account_utils.utils.validation import mask_address

if TYPE_CHECKING:
    from wallet_account_utils.models.account_info import AccountInfo

logger = structlog.get_logger("hardware_account_finder")


def find_hardware_account_info(
    accounts: Iterable["AccountInfo"], address: str
) -> Optional["AccountInfo"]:
    """Return the first hardware account whose address equals `address`.

    Accounts are scanned in order and the scan stops at the first match, so
    with duplicates the earliest record wins. Software accounts are skipped
    even when the address matches. Comparison is exact string equality;
    callers normalise casing beforehand if they need to.

    Returns:
        The matching AccountInfo, or None if there is none.
    """
    scanned = 0
    for account in accounts:
        scanned += 1
        if not account.hardware:
            continue
        if account.address == address:
            logger.debug(
                "hardware_account_found",
                address=mask_address(address),
                position=scanned - 1,
            )
            return account
    logger.debug(
        "hardware_account_not_found",
        address=mask_address(address),
        scanned=scanned,
    )
    return None
