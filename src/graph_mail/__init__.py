# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Microsoft Graph mail transport.

Converts composed e-mail messages into the JSON body of the Graph
``sendMail`` call and hands it to an external API client:

- Primary recipients exclude addresses already in Cc/Bcc
- HTML body preferred, plain text as fallback
- Attachments base64-encoded, inline parts flagged with a content id
- ``X-`` headers forwarded as ``internetMessageHeaders``
- ``saveToSentItems`` from an ``X-Metadata-saveToSentItems`` header or
  the configured default

Example:
    Building a payload::

        from graph_mail import Address, EmailMessage, Envelope, build_payload

        payload = build_payload(
            EmailMessage(subject="Hello", html_body="<p>Hi</p>"),
            Envelope(
                sender=Address(address="noreply@example.com"),
                recipients=[Address(address="alice@example.com")],
            ),
        )
"""

from .config import TransportConfig, load_config
from .models import (
    Address,
    Attachment,
    Disposition,
    EmailMessage,
    Envelope,
    MetadataHeader,
    PlainHeader,
)
from .payload import build_payload
from .sender import GraphSender, RequestFailure, SendResult
from .transport import GraphMailTransport

__all__ = [
    "Address",
    "Attachment",
    "Disposition",
    "EmailMessage",
    "Envelope",
    "GraphMailTransport",
    "GraphSender",
    "MetadataHeader",
    "PlainHeader",
    "RequestFailure",
    "SendResult",
    "TransportConfig",
    "build_payload",
    "load_config",
]
