# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Conversion of stdlib MIME messages into transport models.

Accepts :class:`email.message.EmailMessage` instances, as produced by
``email.message_from_bytes(data, policy=email.policy.default)`` or built
with ``EmailMessage()`` directly.

Headers named ``X-Metadata-<key>`` become :class:`MetadataHeader`
instances; every other header is kept as a :class:`PlainHeader`.
"""

from __future__ import annotations

from email.message import EmailMessage as MIMEMessage
from email.utils import getaddresses

from .models import (
    METADATA_HEADER_PREFIX,
    Address,
    Attachment,
    Disposition,
    EmailMessage,
    Envelope,
    Header,
    MetadataHeader,
    PlainHeader,
)


def _addresses(msg: MIMEMessage, *names: str) -> list[Address]:
    values: list[str] = []
    for name in names:
        values.extend(str(value) for value in msg.get_all(name, []))
    return [Address(address=addr) for _, addr in getaddresses(values) if addr]


def _headers(msg: MIMEMessage) -> list[Header]:
    headers: list[Header] = []
    prefix = METADATA_HEADER_PREFIX.lower()
    for name, value in msg.items():
        if name.lower().startswith(prefix) and len(name) > len(prefix):
            headers.append(MetadataHeader(key=name[len(prefix):], value=str(value)))
        else:
            headers.append(PlainHeader(name=name, value=str(value)))
    return headers


def _leaf_parts(part: MIMEMessage):
    """Yield non-multipart parts; ``message/*`` parts are yielded whole."""
    if part.get_content_maintype() == "multipart":
        for subpart in part.iter_parts():
            yield from _leaf_parts(subpart)
    else:
        yield part


def _part_content(part: MIMEMessage) -> bytes:
    if part.is_multipart():
        # message/rfc822 and friends carry the embedded message as payload
        return b"".join(inner.as_bytes() for inner in part.get_payload())
    return part.get_payload(decode=True) or b""


def _text_content(part: MIMEMessage) -> str:
    try:
        return part.get_content()
    except LookupError:
        # unknown charset
        return (part.get_payload(decode=True) or b"").decode("utf-8", errors="replace")


def _attachments(msg: MIMEMessage, body_parts: list[MIMEMessage]) -> list[Attachment]:
    attachments = []
    for part in _leaf_parts(msg):
        if any(part is body for body in body_parts):
            continue
        disposition = part.get_content_disposition()
        # undeclared text parts are alternative bodies, not files
        if disposition is None and part.get_content_maintype() == "text":
            continue
        attachments.append(
            Attachment(
                filename=part.get_filename(),
                media_type=part.get_content_type(),
                content=_part_content(part),
                disposition=Disposition.INLINE if disposition == "inline" else Disposition.ATTACHMENT,
            )
        )
    return attachments


def message_from_mime(msg: MIMEMessage) -> EmailMessage:
    """Build an :class:`EmailMessage` from a parsed MIME message."""
    html_part = msg.get_body(preferencelist=("html",))
    text_part = msg.get_body(preferencelist=("plain",))
    body_parts = [part for part in (html_part, text_part) if part is not None]

    subject = msg.get("Subject")
    return EmailMessage(
        subject=str(subject) if subject is not None else None,
        html_body=_text_content(html_part) if html_part is not None else None,
        text_body=_text_content(text_part) if text_part is not None else None,
        cc=_addresses(msg, "Cc"),
        bcc=_addresses(msg, "Bcc"),
        reply_to=_addresses(msg, "Reply-To"),
        headers=_headers(msg),
        attachments=_attachments(msg, body_parts),
    )


def envelope_from_mime(msg: MIMEMessage) -> Envelope:
    """Derive the envelope from the message headers.

    The sender is taken from ``Sender``, then ``Return-Path``, then the
    first ``From`` address. Recipients are To, Cc and Bcc, in that order.

    Raises:
        ValueError: If no sender or no recipient can be determined.
    """
    sender = None
    for name in ("Sender", "Return-Path", "From"):
        found = _addresses(msg, name)
        if found:
            sender = found[0]
            break
    if sender is None:
        raise ValueError("Unable to determine the envelope sender: no Sender, Return-Path or From header")

    recipients = _addresses(msg, "To", "Cc", "Bcc")
    if not recipients:
        raise ValueError("Unable to determine the envelope recipients: no To, Cc or Bcc header")

    return Envelope(sender=sender, recipients=recipients)


__all__ = ["envelope_from_mime", "message_from_mime"]
