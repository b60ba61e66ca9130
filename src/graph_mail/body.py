# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Body content selection.

The content type follows the presence of an HTML body, while the content
itself falls back on truthiness: an empty HTML body is reported as
``HTML`` but carries the plain text body. HTML is passed through as is;
``cid:`` references are not rewritten to match attachment content ids.
"""

from __future__ import annotations

from typing import Literal

ContentType = Literal["HTML", "Text"]


def select_body(html_body: str | None, text_body: str | None) -> tuple[ContentType, str | None]:
    """Return ``(content_type, content)`` for the Graph ``body`` field."""
    content_type: ContentType = "Text" if html_body is None else "HTML"
    return content_type, html_body or text_body


__all__ = ["ContentType", "select_body"]
