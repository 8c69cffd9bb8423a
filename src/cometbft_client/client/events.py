"""Event normalisation — base64 or plain-text attributes to plain text.

Nodes before CometBFT v0.37 emit event attribute keys and values as base64;
later nodes emit plain text. Responses carry no version marker, so the
encoding is inferred per batch: every attribute is decoded, and if any single
decode fails the whole batch is returned as received. Decoding part of a batch
would mix encodings.

Plain text that happens to be valid base64 (``"abcd"``, ``"test"``) is
decoded like any other value when the rest of its batch decodes too. Decoded
bytes that are not UTF-8 are kept with ``surrogateescape`` so that binary
payloads (protobuf packet data) do not force the batch back to base64.
"""

from __future__ import annotations

import binascii
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from cometbft_client.errors.client_errors import EventDecodeError
from cometbft_client.utils.encoding import decode_base64

if TYPE_CHECKING:
    from cometbft_client.abci.types import Event

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Stable event types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Attribute:
    """A plain-text event attribute."""

    key: str
    value: str
    index: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "value": self.value, "index": self.index}


@dataclass(frozen=True)
class StringEvent:
    """An event whose attribute keys and values are plain text."""

    type: str
    attributes: tuple[Attribute, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "attributes": [attr.to_dict() for attr in self.attributes],
        }


# ---------------------------------------------------------------------------
# Normalisation
# ---------------------------------------------------------------------------


def parse_events(events: Iterable[Event]) -> tuple[StringEvent, ...]:
    """Normalise a batch of raw events to plain text.

    Tries :func:`base64_decode_events` first and falls back to
    :func:`stringify_events` if any attribute fails to decode. Never raises.

    Args:
        events: Raw events as returned by the node.

    Returns:
        Events with plain-text attributes, in input order.
    """
    events = tuple(events)
    if not events:
        return ()

    try:
        return base64_decode_events(events)
    except EventDecodeError as exc:
        logger.debug("Event attributes are not base64 (%s), using raw text", exc)
        return stringify_events(events)


def base64_decode_events(events: Iterable[Event]) -> tuple[StringEvent, ...]:
    """Base64-decode every attribute key and value of every event.

    Raises:
        EventDecodeError: On the first key or value that is not standard
            padded base64.
    """
    return tuple(
        StringEvent(
            type=event.type,
            attributes=tuple(
                Attribute(
                    key=_decode_text(attr.key),
                    value=_decode_text(attr.value),
                    index=attr.index,
                )
                for attr in event.attributes
            ),
        )
        for event in events
    )


def stringify_events(events: Iterable[Event]) -> tuple[StringEvent, ...]:
    """Copy events to the stable shape without touching attribute text."""
    return tuple(stringify_event(event) for event in events)


def stringify_event(event: Event) -> StringEvent:
    """Copy a single event to the stable shape without touching attribute text."""
    return StringEvent(
        type=event.type,
        attributes=tuple(
            Attribute(key=attr.key, value=attr.value, index=attr.index)
            for attr in event.attributes
        ),
    )


def _decode_text(value: str) -> str:
    # Non-UTF-8 bytes survive as lone surrogates and round-trip losslessly.
    try:
        return decode_base64(value).decode("utf-8", errors="surrogateescape")
    except binascii.Error as exc:
        msg = f"cannot decode {value!r}: {exc}"
        raise EventDecodeError(msg) from exc
