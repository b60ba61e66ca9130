# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Assembly of the Graph ``sendMail`` request body.

The payload is built fresh on every call from the message and envelope;
nothing is cached and the inputs are left untouched.
"""

from __future__ import annotations

from typing import Any

from .addresses import map_address, map_addresses, resolve_recipients
from .attachments import encode_attachments
from .body import select_body
from .headers import extract_save_to_sent_items, filter_headers
from .models import EmailMessage, Envelope


def build_payload(
    message: EmailMessage,
    envelope: Envelope,
    save_to_sent_items: bool = False,
) -> dict[str, Any]:
    """Build the JSON body for ``POST /users/{sender}/sendMail``.

    Args:
        message: The composed message.
        envelope: Transport sender and recipients.
        save_to_sent_items: Configured default, overridden by a
            ``saveToSentItems`` metadata header on the message.

    Returns:
        A dict with ``message`` and ``saveToSentItems`` keys.
        ``message.internetMessageHeaders`` is present only when at least
        one header is forwardable.
    """
    content_type, content = select_body(message.html_body, message.text_body)
    to_recipients = resolve_recipients(envelope.recipients, message.cc, message.bcc)

    graph_message: dict[str, Any] = {
        "subject": message.subject,
        "body": {
            "contentType": content_type,
            "content": content,
        },
        "toRecipients": map_addresses(to_recipients),
        "ccRecipients": map_addresses(message.cc),
        "bccRecipients": map_addresses(message.bcc),
        "replyTo": map_addresses(message.reply_to),
        "sender": map_address(envelope.sender),
        "attachments": encode_attachments(message.attachments),
    }

    headers = filter_headers(message.headers)
    if headers:
        graph_message["internetMessageHeaders"] = headers

    return {
        "message": graph_message,
        "saveToSentItems": extract_save_to_sent_items(message.headers, save_to_sent_items),
    }


__all__ = ["build_payload"]
