"""Block event sources — unified finalize-block events vs. legacy begin/end.

CometBFT v0.38 replaced the begin-block and end-block event lists with a
single ``finalize_block_events`` list. A block-results payload carries one
shape or the other; which one is decided by looking at what is populated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cometbft_client.abci.types import Event
    from cometbft_client.rpc.models import ResultBlockResults


@dataclass(frozen=True)
class UnifiedEvents:
    """Block-level events from a v0.38+ node."""

    events: tuple[Event, ...]

    def ordered(self) -> tuple[Event, ...]:
        return self.events


@dataclass(frozen=True)
class LegacyEvents:
    """Block-level events from a pre-v0.38 node."""

    begin_block: tuple[Event, ...] = ()
    end_block: tuple[Event, ...] = ()

    def ordered(self) -> tuple[Event, ...]:
        """Begin-block events followed by end-block events."""
        return self.begin_block + self.end_block


BlockEventSource = UnifiedEvents | LegacyEvents


def block_event_source(raw: ResultBlockResults) -> BlockEventSource:
    """Select the block-level event shape of a block-results payload.

    A non-empty ``finalize_block_events`` list wins; the legacy lists are then
    ignored even if populated. Otherwise the legacy pair is used, each list
    defaulting to empty.
    """
    if raw.finalize_block_events:
        return UnifiedEvents(events=raw.finalize_block_events)
    return LegacyEvents(
        begin_block=raw.begin_block_events or (),
        end_block=raw.end_block_events or (),
    )
