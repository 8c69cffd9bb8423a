"""ABCI — raw application result types returned by the node."""

from cometbft_client.abci.types import (
    CODE_TYPE_OK,
    Event,
    EventAttribute,
    ExecTxResult,
    ProofOp,
    ProofOps,
    ResponseInfo,
    ResponseQuery,
    ValidatorUpdate,
    frozen_mapping,
)

__all__ = [
    "CODE_TYPE_OK",
    "Event",
    "EventAttribute",
    "ExecTxResult",
    "ProofOp",
    "ProofOps",
    "ResponseInfo",
    "ResponseQuery",
    "ValidatorUpdate",
    "frozen_mapping",
]
