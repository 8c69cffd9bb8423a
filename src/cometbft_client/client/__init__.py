"""Client — facade and version-independent response types."""

from cometbft_client.client.blocks import LegacyEvents, UnifiedEvents, block_event_source
from cometbft_client.client.client import CometClient
from cometbft_client.client.events import Attribute, StringEvent, parse_events
from cometbft_client.client.response import (
    BlockResponse,
    ExecTxResponse,
    TxResponse,
    reshape_tx_search,
)

__all__ = [
    "Attribute",
    "BlockResponse",
    "CometClient",
    "ExecTxResponse",
    "LegacyEvents",
    "StringEvent",
    "TxResponse",
    "UnifiedEvents",
    "block_event_source",
    "parse_events",
    "reshape_tx_search",
]
