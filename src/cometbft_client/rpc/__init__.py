"""RPC — transport interface, JSON-RPC over HTTP, raw result models."""

from cometbft_client.rpc.http import HTTPTransport
from cometbft_client.rpc.models import (
    ABCIQueryOptions,
    ResultABCIInfo,
    ResultABCIQuery,
    ResultBlockResults,
    ResultTx,
    ResultTxSearch,
)
from cometbft_client.rpc.transport import RPCTransport

__all__ = [
    "ABCIQueryOptions",
    "HTTPTransport",
    "RPCTransport",
    "ResultABCIInfo",
    "ResultABCIQuery",
    "ResultBlockResults",
    "ResultTx",
    "ResultTxSearch",
]
