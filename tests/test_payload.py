# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for sendMail payload assembly."""

import base64
import json

from graph_mail.models import Address, EmailMessage, Envelope, MetadataHeader, PlainHeader
from graph_mail.payload import build_payload


def emails(recipients):
    return [r["emailAddress"]["address"] for r in recipients]


class TestBuildPayload:
    """Tests for the assembled payload."""

    def test_full_payload(self, message, envelope):
        """All fields are populated from message and envelope."""
        payload = build_payload(message, envelope)
        graph = payload["message"]

        assert set(payload) == {"message", "saveToSentItems"}
        assert graph["subject"] == "Quarterly report"
        assert graph["body"] == {
            "contentType": "HTML",
            "content": "<p>See <img src='cid:logo.png'></p>",
        }
        assert emails(graph["toRecipients"]) == ["alice@example.com", "carol@example.com"]
        assert emails(graph["ccRecipients"]) == ["bob@example.com"]
        assert emails(graph["bccRecipients"]) == ["dave@example.com"]
        assert emails(graph["replyTo"]) == ["support@example.com"]
        assert graph["sender"] == {"emailAddress": {"address": "noreply@example.com"}}
        assert [a["name"] for a in graph["attachments"]] == ["logo.png", "report.pdf"]
        assert graph["attachments"][0]["isInline"] is True
        assert graph["attachments"][1]["contentBytes"] == base64.b64encode(b"%PDF-1.4").decode()
        assert graph["internetMessageHeaders"] == [
            {"name": "X-Campaign", "value": "q3"},
            {"name": "X-Priority", "value": "1"},
        ]
        assert payload["saveToSentItems"] is True

    def test_headers_key_omitted_when_empty(self, envelope):
        """internetMessageHeaders is absent without forwardable headers."""
        message = EmailMessage(
            subject="s",
            text_body="t",
            headers=[PlainHeader(name="Subject", value="s"), MetadataHeader(key="k", value="v")],
        )
        assert "internetMessageHeaders" not in build_payload(message, envelope)["message"]

    def test_configured_default_used(self, envelope):
        """The default applies without a metadata header."""
        message = EmailMessage(text_body="t")
        assert build_payload(message, envelope)["saveToSentItems"] is False
        assert build_payload(message, envelope, save_to_sent_items=True)["saveToSentItems"] is True

    def test_metadata_overrides_default(self, envelope):
        """The metadata header takes precedence over the default."""
        message = EmailMessage(headers=[MetadataHeader(key="saveToSentItems", value="no")])
        assert build_payload(message, envelope, save_to_sent_items=True)["saveToSentItems"] is False

    def test_text_body(self, envelope):
        """Text-only messages use the Text content type."""
        body = build_payload(EmailMessage(text_body="plain"), envelope)["message"]["body"]
        assert body == {"contentType": "Text", "content": "plain"}

    def test_only_to_list_filtered(self):
        """Cc/Bcc lists are copied as declared, even when not in the envelope."""
        envelope = Envelope(
            sender=Address(address="s@example.com"),
            recipients=[Address(address="a@example.com")],
        )
        message = EmailMessage(
            cc=[Address(address="a@example.com"), Address(address="z@example.com")],
        )
        graph = build_payload(message, envelope)["message"]
        assert graph["toRecipients"] == []
        assert emails(graph["ccRecipients"]) == ["a@example.com", "z@example.com"]

    def test_idempotent(self, message, envelope):
        """Identical inputs give identical payloads."""
        assert build_payload(message, envelope) == build_payload(message, envelope)

    def test_inputs_not_mutated(self, message, envelope):
        """Message and envelope are unchanged after assembly."""
        before = (message.model_dump(), envelope.model_dump())
        build_payload(message, envelope)
        assert (message.model_dump(), envelope.model_dump()) == before

    def test_json_serializable(self, message, envelope):
        """The payload can be sent as a JSON body."""
        decoded = json.loads(json.dumps(build_payload(message, envelope)))
        assert decoded["message"]["attachments"][0]["@odata.type"] == "#microsoft.graph.fileAttachment"
