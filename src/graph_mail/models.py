# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pydantic models for outbound messages.

All models are frozen: instances compare by value and the payload
builders never mutate them.

Models:
    - Address: A single e-mail address
    - PlainHeader / MetadataHeader: Tagged header variants (``kind``)
    - Attachment: File attached to a message, inline or downloadable
    - EmailMessage: Composed message content
    - Envelope: Transport-level sender and recipients
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

METADATA_HEADER_PREFIX = "X-Metadata-"


class Address(BaseModel):
    """E-mail address. Equality is by address string."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    address: Annotated[str, Field(description="E-mail address")]


class PlainHeader(BaseModel):
    """Ordinary message header with an arbitrary name."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["plain"] = "plain"
    name: Annotated[str, Field(min_length=1, description="Header name")]
    value: Annotated[str, Field(default="", description="Header value")]


class MetadataHeader(BaseModel):
    """Reserved control header, consumed by the transport and never forwarded.

    The wire name is ``X-Metadata-<key>``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["metadata"] = "metadata"
    key: Annotated[str, Field(min_length=1, description="Metadata key")]
    value: Annotated[str, Field(default="", description="Metadata value")]

    @property
    def name(self) -> str:
        return f"{METADATA_HEADER_PREFIX}{self.key}"


Header = Annotated[Union[PlainHeader, MetadataHeader], Field(discriminator="kind")]


class Disposition(str, Enum):
    """Content-Disposition of an attachment."""

    INLINE = "inline"
    ATTACHMENT = "attachment"


class Attachment(BaseModel):
    """Attachment with raw content.

    Attributes:
        filename: Content-Disposition filename parameter, if any.
        media_type: MIME type, e.g. ``image/png``.
        content: Raw (decoded) bytes.
        disposition: ``inline`` for in-body references, else ``attachment``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    filename: Annotated[str | None, Field(default=None, description="Attachment filename")]
    media_type: Annotated[
        str, Field(default="application/octet-stream", description="MIME type")
    ]
    content: Annotated[bytes, Field(default=b"", description="Raw attachment bytes")]
    disposition: Annotated[
        Disposition, Field(default=Disposition.ATTACHMENT, description="Content disposition")
    ]


class EmailMessage(BaseModel):
    """Composed message: subject, bodies, declared copies, headers and attachments."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    subject: Annotated[str | None, Field(default=None, description="Subject line")]
    html_body: Annotated[str | None, Field(default=None, description="HTML body")]
    text_body: Annotated[str | None, Field(default=None, description="Plain text body")]
    cc: Annotated[list[Address], Field(default_factory=list, description="Carbon copies")]
    bcc: Annotated[list[Address], Field(default_factory=list, description="Blind copies")]
    reply_to: Annotated[
        list[Address], Field(default_factory=list, description="Reply-To addresses")
    ]
    headers: Annotated[list[Header], Field(default_factory=list, description="Ordered headers")]
    attachments: Annotated[
        list[Attachment], Field(default_factory=list, description="Ordered attachments")
    ]


class Envelope(BaseModel):
    """Transport sender and recipients.

    ``recipients`` may repeat addresses declared in the message's Cc/Bcc.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    sender: Address
    recipients: Annotated[list[Address], Field(default_factory=list)]


__all__ = [
    "Address",
    "Attachment",
    "Disposition",
    "EmailMessage",
    "Envelope",
    "Header",
    "MetadataHeader",
    "METADATA_HEADER_PREFIX",
    "PlainHeader",
]
