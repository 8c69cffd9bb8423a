"""cometbft-client — CometBFT RPC client with version-independent results."""

from cometbft_client.client import (
    Attribute,
    BlockResponse,
    CometClient,
    ExecTxResponse,
    StringEvent,
    TxResponse,
)
from cometbft_client.config import ClientConfig, RPCConfig
from cometbft_client.errors import CometClientError, RPCError, TransportError

__version__ = "0.1.0"

__all__ = [
    "Attribute",
    "BlockResponse",
    "ClientConfig",
    "CometClient",
    "CometClientError",
    "ExecTxResponse",
    "RPCConfig",
    "RPCError",
    "StringEvent",
    "TransportError",
    "TxResponse",
]
