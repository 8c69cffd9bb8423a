"""RPC result models — block results, transaction lookups, ABCI info/query.

Data classes representing the ``result`` objects of the CometBFT JSON-RPC
methods that the client reshapes or types. All other methods are returned to
callers as plain dicts.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from cometbft_client.abci.types import (
    Event,
    ExecTxResult,
    ResponseInfo,
    ResponseQuery,
    ValidatorUpdate,
    events_from_list,
    frozen_mapping,
)
from cometbft_client.utils.encoding import decode_base64, decode_hex, parse_int

# ---------------------------------------------------------------------------
# block_results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ResultBlockResults:
    """Raw ``block_results`` payload.

    Nodes running CometBFT v0.38+ populate ``finalize_block_events``; older
    nodes populate ``begin_block_events`` and ``end_block_events`` instead.
    A ``None`` list means the field was absent from the response.

    Attributes:
        height: Block height.
        txs_results: Per-transaction results, in block order.
        finalize_block_events: Unified block-level events (v0.38+).
        begin_block_events: Legacy begin-block events.
        end_block_events: Legacy end-block events.
        validator_updates: Validator set changes applied at this height.
        consensus_param_updates: Opaque consensus parameter changes.
        app_hash: Application state hash after this block.
    """

    height: int = 0
    txs_results: tuple[ExecTxResult, ...] = ()
    finalize_block_events: tuple[Event, ...] | None = None
    begin_block_events: tuple[Event, ...] | None = None
    end_block_events: tuple[Event, ...] | None = None
    validator_updates: tuple[ValidatorUpdate, ...] = ()
    consensus_param_updates: Mapping[str, Any] | None = field(default=None, hash=False)
    app_hash: bytes = b""

    def __post_init__(self) -> None:
        if self.consensus_param_updates is not None:
            object.__setattr__(
                self, "consensus_param_updates", frozen_mapping(self.consensus_param_updates)
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResultBlockResults:
        """Create a ResultBlockResults from a node JSON ``result`` object."""
        return cls(
            height=parse_int(data.get("height")),
            txs_results=tuple(
                ExecTxResult.from_dict(tx) for tx in data.get("txs_results") or ()
            ),
            finalize_block_events=_optional_events(data, "finalize_block_events"),
            begin_block_events=_optional_events(data, "begin_block_events"),
            end_block_events=_optional_events(data, "end_block_events"),
            validator_updates=tuple(
                ValidatorUpdate.from_dict(v) for v in data.get("validator_updates") or ()
            ),
            consensus_param_updates=data.get("consensus_param_updates"),
            app_hash=decode_base64(data.get("app_hash")),
        )


def _optional_events(data: dict[str, Any], name: str) -> tuple[Event, ...] | None:
    if name not in data:
        return None
    return events_from_list(data[name])


# ---------------------------------------------------------------------------
# tx / tx_search
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ResultTx:
    """Raw ``tx`` payload: one committed transaction and its result.

    ``proof`` is only populated when the lookup asked for one and is passed
    through without verification.
    """

    hash: bytes = b""
    height: int = 0
    index: int = 0
    tx_result: ExecTxResult = field(default_factory=ExecTxResult)
    tx: bytes = b""
    proof: Mapping[str, Any] | None = field(default=None, hash=False)

    def __post_init__(self) -> None:
        if self.proof is not None:
            object.__setattr__(self, "proof", frozen_mapping(self.proof))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResultTx:
        """Create a ResultTx from a node JSON ``result`` object."""
        return cls(
            hash=decode_hex(data.get("hash")),
            height=parse_int(data.get("height")),
            index=parse_int(data.get("index")),
            tx_result=ExecTxResult.from_dict(data.get("tx_result") or {}),
            tx=decode_base64(data.get("tx")),
            proof=data.get("proof") or None,
        )


@dataclass(frozen=True)
class ResultTxSearch:
    """Raw ``tx_search`` payload, in the order the node returned it."""

    txs: tuple[ResultTx, ...] = ()
    total_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResultTxSearch:
        return cls(
            txs=tuple(ResultTx.from_dict(tx) for tx in data.get("txs") or ()),
            total_count=parse_int(data.get("total_count")),
        )


# ---------------------------------------------------------------------------
# abci_info / abci_query
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ResultABCIInfo:
    """Raw ``abci_info`` payload."""

    response: ResponseInfo = field(default_factory=ResponseInfo)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResultABCIInfo:
        return cls(response=ResponseInfo.from_dict(data.get("response") or {}))


@dataclass(frozen=True)
class ResultABCIQuery:
    """Raw ``abci_query`` payload."""

    response: ResponseQuery = field(default_factory=ResponseQuery)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResultABCIQuery:
        return cls(response=ResponseQuery.from_dict(data.get("response") or {}))


@dataclass(frozen=True)
class ABCIQueryOptions:
    """Options for ``abci_query``; height ``0`` means latest."""

    height: int = 0
    prove: bool = False


DEFAULT_ABCI_QUERY_OPTIONS = ABCIQueryOptions()
