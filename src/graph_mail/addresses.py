# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Address mapping and primary recipient resolution."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .models import Address


def map_address(address: Address) -> dict[str, dict[str, str]]:
    """Map an address to the Graph ``emailAddress`` shape."""
    return {"emailAddress": {"address": address.address}}


def map_addresses(addresses: Iterable[Address]) -> list[dict[str, Any]]:
    return [map_address(address) for address in addresses]


def resolve_recipients(
    recipients: Iterable[Address],
    cc: Iterable[Address],
    bcc: Iterable[Address],
) -> list[Address]:
    """Return the envelope recipients that belong in the To list.

    Recipients already declared as Cc or Bcc are dropped, compared by
    address value. Relative order is kept and duplicates among the
    remaining recipients are not merged.
    """
    copied = {address.address for address in cc} | {address.address for address in bcc}
    return [address for address in recipients if address.address not in copied]


__all__ = ["map_address", "map_addresses", "resolve_recipients"]
