# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Microsoft Graph mail transport.

Turns a message and its envelope into a ``sendMail`` payload and hands it
to a :class:`~graph_mail.sender.GraphSender`. The outcome is returned as a
:class:`~graph_mail.sender.SendResult`; failures are logged, never retried.

Example:
    Sending a parsed ``.eml`` file::

        transport = GraphMailTransport(graph_client, TransportConfig(save_to_sent_items=True))
        result = await transport.send_mime(email.message_from_bytes(raw, policy=policy.default))
        result.raise_for_failure()
"""

from __future__ import annotations

import logging
from email.message import EmailMessage as MIMEMessage
from typing import Any

from .config import TransportConfig
from .converter import envelope_from_mime, message_from_mime
from .logger import get_logger
from .models import EmailMessage, Envelope
from .payload import build_payload
from .sender import GraphSender, SendResult


class GraphMailTransport:
    """Mail transport delivering through the Microsoft Graph API.

    Attributes:
        sender: Graph API client performing the request.
        config: Transport settings.
        logger: Logger for delivery activity.
    """

    def __init__(
        self,
        sender: GraphSender,
        config: TransportConfig | None = None,
        logger: logging.Logger | None = None,
    ):
        self.sender = sender
        self.config = config or TransportConfig()
        self.logger = logger or get_logger("transport")

    def __str__(self) -> str:
        return "microsoft+graph+api://"

    def build_payload(self, message: EmailMessage, envelope: Envelope) -> dict[str, Any]:
        return build_payload(message, envelope, save_to_sent_items=self.config.save_to_sent_items)

    async def send(self, message: EmailMessage, envelope: Envelope) -> SendResult:
        """Build the payload and deliver it as ``envelope.sender``.

        Returns:
            The sender's result, unchanged.
        """
        payload = self.build_payload(message, envelope)
        sender_address = envelope.sender.address

        if self.config.log_payloads:
            graph_message = payload["message"]
            self.logger.debug(
                "[%s] payload for %s: to=%d cc=%d bcc=%d attachments=%d headers=%d saveToSentItems=%s",
                self.config.name,
                sender_address,
                len(graph_message["toRecipients"]),
                len(graph_message["ccRecipients"]),
                len(graph_message["bccRecipients"]),
                len(graph_message["attachments"]),
                len(graph_message.get("internetMessageHeaders", [])),
                payload["saveToSentItems"],
            )

        result = await self.sender.send_mail(sender_address, payload)

        if result.ok:
            self.logger.info(
                "[%s] message sent for %s (id=%s)", self.config.name, sender_address, result.message_id
            )
        else:
            self.logger.warning(
                "[%s] sendMail failed for %s: %s", self.config.name, sender_address, result.error
            )
        return result

    async def send_mime(self, mime_message: MIMEMessage, envelope: Envelope | None = None) -> SendResult:
        """Convert a stdlib MIME message and send it.

        The envelope is derived from the message headers when not given.
        """
        if envelope is None:
            envelope = envelope_from_mime(mime_message)
        return await self.send(message_from_mime(mime_message), envelope)


__all__ = ["GraphMailTransport"]
