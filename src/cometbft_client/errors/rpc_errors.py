"""RPC transport errors — node-reported errors and network failures."""

from __future__ import annotations

from typing import Any

from cometbft_client.errors.client_errors import CometClientError


class RPCError(CometClientError):
    """The node answered with a JSON-RPC ``error`` object.

    Attributes:
        operation: The RPC method that was invoked.
        rpc_code: JSON-RPC error code reported by the node.
        data: Additional error detail reported by the node.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        rpc_code: int | None = None,
        data: Any = "",
    ) -> None:
        super().__init__(message, code="rpc-error")
        self.operation = operation
        self.rpc_code = rpc_code
        self.data = data


class TransportError(CometClientError):
    """The RPC call failed before a usable result was obtained.

    Covers network failures, non-2xx HTTP responses and undecodable bodies.

    Attributes:
        operation: The RPC method that was invoked.
        status_code: HTTP status code, if a response was received.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, code="transport-error")
        self.operation = operation
        self.status_code = status_code
