"""ABCI data models — events, execution results, validator updates, queries.

Raw protocol values as a CometBFT node returns them over JSON-RPC. Event
attribute keys and values are kept exactly as received: depending on the node
version they are either base64 or plain text. Normalisation happens in
:mod:`cometbft_client.client.events`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from cometbft_client.utils.encoding import decode_base64, parse_int

CODE_TYPE_OK = 0


def frozen_mapping(value: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
    """Return a read-only view over a copy of *value* (empty for ``None``).

    Only the top level is frozen; nested JSON objects are shared.
    """
    if isinstance(value, MappingProxyType):
        return value
    return MappingProxyType(dict(value or {}))


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EventAttribute:
    """A single key/value pair attached to an event.

    Attributes:
        key: Attribute key (base64 or plain text, as emitted by the node).
        value: Attribute value (base64 or plain text, as emitted by the node).
        index: Whether the node indexes this attribute for search.
    """

    key: str = ""
    value: str = ""
    index: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EventAttribute:
        return cls(
            key=data.get("key") or "",
            value=data.get("value") or "",
            index=bool(data.get("index", False)),
        )


@dataclass(frozen=True)
class Event:
    """A typed, ordered group of attributes emitted during execution."""

    type: str = ""
    attributes: tuple[EventAttribute, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Event:
        return cls(
            type=data.get("type") or "",
            attributes=tuple(
                EventAttribute.from_dict(attr) for attr in data.get("attributes") or ()
            ),
        )


def events_from_list(items: list[dict[str, Any]] | None) -> tuple[Event, ...]:
    """Parse a JSON event list, treating ``null`` as empty."""
    return tuple(Event.from_dict(item) for item in items or ())


# ---------------------------------------------------------------------------
# Transaction execution result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ExecTxResult:
    """Result of executing one transaction, as reported by the node.

    Attributes:
        code: Result code (``0`` is success); unsigned 32-bit.
        data: Application return data.
        log: Non-deterministic log output.
        info: Additional non-deterministic information.
        gas_wanted: Gas requested by the transaction; signed 64-bit.
        gas_used: Gas consumed by the transaction; signed 64-bit.
        events: Events emitted while executing the transaction.
        codespace: Namespace for ``code``.
    """

    code: int = CODE_TYPE_OK
    data: bytes = b""
    log: str = ""
    info: str = ""
    gas_wanted: int = 0
    gas_used: int = 0
    events: tuple[Event, ...] = ()
    codespace: str = ""

    def is_ok(self) -> bool:
        """Return True if ``code`` is the success code."""
        return self.code == CODE_TYPE_OK

    def is_err(self) -> bool:
        """Return True if ``code`` is anything other than the success code."""
        return self.code != CODE_TYPE_OK

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExecTxResult:
        """Create an ExecTxResult from a node JSON ``tx_result`` object."""
        return cls(
            code=parse_int(data.get("code")),
            data=decode_base64(data.get("data")),
            log=data.get("log") or "",
            info=data.get("info") or "",
            gas_wanted=parse_int(data.get("gas_wanted")),
            gas_used=parse_int(data.get("gas_used")),
            events=events_from_list(data.get("events")),
            codespace=data.get("codespace") or "",
        )


# ---------------------------------------------------------------------------
# Validator updates
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ValidatorUpdate:
    """A change in a validator's voting power.

    ``pub_key`` is carried through untouched as a read-only mapping; key
    decoding is left to callers.
    """

    pub_key: Mapping[str, Any] = field(default_factory=frozen_mapping, hash=False)
    power: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "pub_key", frozen_mapping(self.pub_key))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ValidatorUpdate:
        return cls(
            pub_key=data.get("pub_key") or {},
            power=parse_int(data.get("power")),
        )


# ---------------------------------------------------------------------------
# Info / query
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ResponseInfo:
    """Application info returned by ``abci_info``."""

    data: str = ""
    version: str = ""
    app_version: int = 0
    last_block_height: int = 0
    last_block_app_hash: bytes = b""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResponseInfo:
        return cls(
            data=data.get("data") or "",
            version=data.get("version") or "",
            app_version=parse_int(data.get("app_version")),
            last_block_height=parse_int(data.get("last_block_height")),
            last_block_app_hash=decode_base64(data.get("last_block_app_hash")),
        )


@dataclass(frozen=True)
class ProofOp:
    """One Merkle proof operation."""

    type: str = ""
    key: bytes = b""
    data: bytes = b""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProofOp:
        return cls(
            type=data.get("type") or "",
            key=decode_base64(data.get("key")),
            data=decode_base64(data.get("data")),
        )


@dataclass(frozen=True)
class ProofOps:
    """Merkle proof as an ordered list of operations."""

    ops: tuple[ProofOp, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProofOps:
        return cls(ops=tuple(ProofOp.from_dict(op) for op in data.get("ops") or ()))


@dataclass(frozen=True)
class ResponseQuery:
    """Result of an ABCI key/value query."""

    code: int = CODE_TYPE_OK
    log: str = ""
    info: str = ""
    index: int = 0
    key: bytes = b""
    value: bytes = b""
    proof_ops: ProofOps | None = None
    height: int = 0
    codespace: str = ""

    def is_ok(self) -> bool:
        """Return True if ``code`` is the success code."""
        return self.code == CODE_TYPE_OK

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResponseQuery:
        proof = data.get("proofOps") or data.get("proof_ops")
        return cls(
            code=parse_int(data.get("code")),
            log=data.get("log") or "",
            info=data.get("info") or "",
            index=parse_int(data.get("index")),
            key=decode_base64(data.get("key")),
            value=decode_base64(data.get("value")),
            proof_ops=ProofOps.from_dict(proof) if proof else None,
            height=parse_int(data.get("height")),
            codespace=data.get("codespace") or "",
        )
