"""CometClientError — base exception class for all cometbft-client errors."""

from __future__ import annotations


class CometClientError(Exception):
    """Base error for all client operations.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code string.
    """

    def __init__(self, message: str, *, code: str = "client-error") -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class EventDecodeError(CometClientError):
    """An event attribute was not valid standard base64.

    Raised by :func:`cometbft_client.client.events.base64_decode_events` and
    handled by :func:`~cometbft_client.client.events.parse_events`, which falls
    back to the raw attribute text.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, code="event-decode-error")
