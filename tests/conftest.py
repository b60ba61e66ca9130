# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Shared fixtures for graph-mail tests."""

import pytest

from graph_mail.models import (
    Address,
    Attachment,
    Disposition,
    EmailMessage,
    Envelope,
    MetadataHeader,
    PlainHeader,
)


def addr(value: str) -> Address:
    return Address(address=value)


@pytest.fixture
def envelope():
    """Envelope whose recipients overlap with the message Cc/Bcc."""
    return Envelope(
        sender=addr("noreply@example.com"),
        recipients=[
            addr("alice@example.com"),
            addr("bob@example.com"),
            addr("carol@example.com"),
            addr("dave@example.com"),
        ],
    )


@pytest.fixture
def message():
    """Fully populated message."""
    return EmailMessage(
        subject="Quarterly report",
        html_body="<p>See <img src='cid:logo.png'></p>",
        text_body="See attached",
        cc=[addr("bob@example.com")],
        bcc=[addr("dave@example.com")],
        reply_to=[addr("support@example.com")],
        headers=[
            PlainHeader(name="Subject", value="Quarterly report"),
            PlainHeader(name="X-Campaign", value="q3"),
            MetadataHeader(key="saveToSentItems", value="true"),
            PlainHeader(name="X-Priority", value="1"),
        ],
        attachments=[
            Attachment(
                filename="logo.png",
                media_type="image/png",
                content=b"\x89PNG\r\n",
                disposition=Disposition.INLINE,
            ),
            Attachment(filename="report.pdf", media_type="application/pdf", content=b"%PDF-1.4"),
        ],
    )
