# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Custom header forwarding and metadata flag extraction.

Graph accepts custom ``internetMessageHeaders`` only when their name
starts with ``X-``. Metadata headers (``X-Metadata-<key>``) carry
instructions for the transport itself and are never forwarded; the
``saveToSentItems`` key controls whether Graph keeps a copy of the
message in the sender's Sent Items folder.

See https://learn.microsoft.com/en-us/graph/api/resources/internetmessageheader
"""

from __future__ import annotations

from collections.abc import Iterable

from .config import parse_bool
from .models import Header, MetadataHeader, PlainHeader

FORWARDED_HEADER_PREFIX = "X-"
SAVE_TO_SENT_ITEMS_KEY = "saveToSentItems"


def filter_headers(headers: Iterable[Header]) -> list[dict[str, str]] | None:
    """Return the forwardable headers as Graph ``internetMessageHeaders``.

    Returns None, not an empty list, when no header qualifies so that the
    caller can leave the field out of the payload.
    """
    forwarded = []
    for header in headers:
        match header:
            case PlainHeader(name=name, value=value) if name.startswith(FORWARDED_HEADER_PREFIX):
                forwarded.append({"name": name, "value": value})
    return forwarded or None


def extract_save_to_sent_items(headers: Iterable[Header], default: bool = False) -> bool:
    """Read the saveToSentItems flag from the first matching metadata header.

    Args:
        headers: Message headers, in order.
        default: Value used when no ``saveToSentItems`` metadata header exists.

    Returns:
        The parsed flag. Unrecognized values parse to False.
    """
    for header in headers:
        match header:
            case MetadataHeader(key=key, value=value) if key == SAVE_TO_SENT_ITEMS_KEY:
                return parse_bool(value, default=False)
    return default


__all__ = [
    "FORWARDED_HEADER_PREFIX",
    "SAVE_TO_SENT_ITEMS_KEY",
    "extract_save_to_sent_items",
    "filter_headers",
]
