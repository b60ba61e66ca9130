# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Attachment encoding to Graph ``fileAttachment`` resources.

Each attachment is sent with its content base64-encoded in
``contentBytes``. The filename doubles as ``contentId`` so inline parts
can be referenced from the HTML body as ``cid:<filename>``.

Example:
    Encoding an inline image::

        encode_attachment(Attachment(
            filename="logo.png",
            media_type="image/png",
            content=png_bytes,
            disposition=Disposition.INLINE,
        ))
        # {"@odata.type": "#microsoft.graph.fileAttachment",
        #  "name": "logo.png", "contentType": "image/png",
        #  "contentBytes": "iVBORw0...", "contentId": "logo.png",
        #  "isInline": True}
"""

from __future__ import annotations

import base64
from collections.abc import Iterable
from typing import Any

from .models import Attachment, Disposition

FILE_ATTACHMENT_ODATA_TYPE = "#microsoft.graph.fileAttachment"


def encode_attachment(attachment: Attachment) -> dict[str, Any]:
    """Convert one attachment. A missing filename yields null name and content id."""
    return {
        "@odata.type": FILE_ATTACHMENT_ODATA_TYPE,
        "name": attachment.filename,
        "contentType": attachment.media_type,
        "contentBytes": base64.b64encode(attachment.content).decode("ascii"),
        "contentId": attachment.filename,
        "isInline": attachment.disposition == Disposition.INLINE,
    }


def encode_attachments(attachments: Iterable[Attachment]) -> list[dict[str, Any]]:
    return [encode_attachment(attachment) for attachment in attachments]


__all__ = ["FILE_ATTACHMENT_ODATA_TYPE", "encode_attachment", "encode_attachments"]
