"""Error types raised by cometbft-client."""

from cometbft_client.errors.client_errors import CometClientError, EventDecodeError
from cometbft_client.errors.rpc_errors import RPCError, TransportError

__all__ = ["CometClientError", "EventDecodeError", "RPCError", "TransportError"]
