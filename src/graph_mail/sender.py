# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Interface of the Graph API client that delivers payloads.

The HTTP client itself (token acquisition, request, retries) lives outside
this package. It implements :class:`GraphSender` and reports its outcome
as a :class:`SendResult` instead of raising, so callers branch on
``result.ok``.

Example:
    Handling the outcome::

        result = await sender.send_mail("noreply@example.com", payload)
        if not result.ok:
            logger.warning("Graph rejected message: %s", result.error)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


class RequestFailure(Exception):
    """A Graph API request failed.

    Attributes:
        status: HTTP status code, if a response was received.
        code: Graph error code (e.g. ``ErrorInvalidRecipients``), if any.
        detail: Diagnostic message from the client or the API.
    """

    def __init__(self, detail: str, status: int | None = None, code: str | None = None):
        super().__init__(detail)
        self.detail = detail
        self.status = status
        self.code = code

    def __str__(self) -> str:
        parts = [str(self.status)] if self.status is not None else []
        if self.code:
            parts.append(self.code)
        parts.append(self.detail)
        return " ".join(parts)


@dataclass(frozen=True)
class SendResult:
    """Outcome of a sendMail call: either delivered or a :class:`RequestFailure`."""

    message_id: str | None = None
    error: RequestFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, message_id: str | None = None) -> SendResult:
        return cls(message_id=message_id)

    @classmethod
    def failure(cls, error: RequestFailure) -> SendResult:
        return cls(error=error)

    def raise_for_failure(self) -> SendResult:
        """Raise the carried :class:`RequestFailure`, if any; return self otherwise."""
        if self.error is not None:
            raise self.error
        return self


@runtime_checkable
class GraphSender(Protocol):
    """Client able to POST a payload to ``/users/{sender_address}/sendMail``."""

    async def send_mail(self, sender_address: str, payload: dict[str, Any]) -> SendResult:
        ...


__all__ = ["GraphSender", "RequestFailure", "SendResult"]
