"""Stable response types — block results, execution results, tx lookups.

These replace the node's own result types so that callers always receive
plain-text events, whichever CometBFT version served the request.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from cometbft_client.abci.types import CODE_TYPE_OK, frozen_mapping
from cometbft_client.client.blocks import UnifiedEvents, block_event_source
from cometbft_client.client.events import StringEvent, parse_events
from cometbft_client.utils.encoding import encode_base64, encode_hex

if TYPE_CHECKING:
    from cometbft_client.abci.types import ExecTxResult, ValidatorUpdate
    from cometbft_client.rpc.models import ResultBlockResults, ResultTx, ResultTxSearch

logger = logging.getLogger(__name__)


def _events_to_list(events: tuple[StringEvent, ...]) -> list[dict[str, Any]]:
    return [event.to_dict() for event in events]


# ---------------------------------------------------------------------------
# Execution result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ExecTxResponse:
    """Result of executing one transaction, with plain-text events.

    Attributes:
        code: Result code (``0`` is success).
        data: Application return data, unmodified.
        log: Non-deterministic log output.
        info: Additional non-deterministic information.
        gas_wanted: Gas requested by the transaction.
        gas_used: Gas consumed by the transaction.
        events: Normalised events.
        codespace: Namespace for ``code``.
    """

    code: int = CODE_TYPE_OK
    data: bytes = b""
    log: str = ""
    info: str = ""
    gas_wanted: int = 0
    gas_used: int = 0
    events: tuple[StringEvent, ...] = ()
    codespace: str = ""

    def is_ok(self) -> bool:
        """Return True if ``code`` is the success code."""
        return self.code == CODE_TYPE_OK

    def is_err(self) -> bool:
        """Return True if ``code`` is anything other than the success code."""
        return self.code != CODE_TYPE_OK

    @classmethod
    def from_result(cls, raw: ExecTxResult) -> ExecTxResponse:
        """Reshape a raw execution result, normalising its events."""
        return cls(
            code=raw.code,
            data=raw.data,
            log=raw.log,
            info=raw.info,
            gas_wanted=raw.gas_wanted,
            gas_used=raw.gas_used,
            events=parse_events(raw.events),
            codespace=raw.codespace,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict (``data`` as base64)."""
        return {
            "code": self.code,
            "data": encode_base64(self.data),
            "log": self.log,
            "info": self.info,
            "gas_wanted": self.gas_wanted,
            "gas_used": self.gas_used,
            "events": _events_to_list(self.events),
            "codespace": self.codespace,
        }


# ---------------------------------------------------------------------------
# Block results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BlockResponse:
    """Results of one block, with block-level events in a single list.

    ``events`` holds the finalize-block events for v0.38+ nodes, and the
    begin-block events followed by the end-block events for older nodes.
    """

    height: int = 0
    tx_responses: tuple[ExecTxResponse, ...] = ()
    events: tuple[StringEvent, ...] = ()
    validator_updates: tuple[ValidatorUpdate, ...] = ()
    app_hash: bytes = b""

    @classmethod
    def from_result(cls, raw: ResultBlockResults) -> BlockResponse:
        """Reshape a raw block-results payload.

        Transaction results keep their block order.
        """
        source = block_event_source(raw)
        logger.debug(
            "Block %d events from %s",
            raw.height,
            "finalize_block" if isinstance(source, UnifiedEvents) else "begin/end_block",
        )
        return cls(
            height=raw.height,
            tx_responses=tuple(ExecTxResponse.from_result(tx) for tx in raw.txs_results),
            events=parse_events(source.ordered()),
            validator_updates=raw.validator_updates,
            app_hash=raw.app_hash,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "height": self.height,
            "tx_responses": [tx.to_dict() for tx in self.tx_responses],
            "events": _events_to_list(self.events),
            "validator_updates": [
                {"pub_key": dict(v.pub_key), "power": v.power} for v in self.validator_updates
            ],
            "app_hash": encode_hex(self.app_hash),
        }


# ---------------------------------------------------------------------------
# Transaction lookups
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TxResponse:
    """A committed transaction with its reshaped execution result."""

    hash: bytes = b""
    height: int = 0
    index: int = 0
    exec_tx: ExecTxResponse = field(default_factory=ExecTxResponse)
    tx: bytes = b""
    proof: Mapping[str, Any] | None = field(default=None, hash=False)

    def __post_init__(self) -> None:
        if self.proof is not None:
            object.__setattr__(self, "proof", frozen_mapping(self.proof))

    @classmethod
    def from_result(cls, raw: ResultTx) -> TxResponse:
        """Reshape a raw ``tx`` result."""
        return cls(
            hash=raw.hash,
            height=raw.height,
            index=raw.index,
            exec_tx=ExecTxResponse.from_result(raw.tx_result),
            tx=raw.tx,
            proof=raw.proof,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict (hash as hex, tx as base64)."""
        return {
            "hash": encode_hex(self.hash),
            "height": self.height,
            "index": self.index,
            "exec_tx": self.exec_tx.to_dict(),
            "tx": encode_base64(self.tx),
            "proof": None if self.proof is None else dict(self.proof),
        }


def reshape_tx_search(raw: ResultTxSearch) -> list[TxResponse]:
    """Reshape every result of a ``tx_search``, keeping the node's order."""
    return [TxResponse.from_result(tx) for tx in raw.txs]
