"""Tests for block event source selection."""

from __future__ import annotations

from cometbft_client.abci.types import Event
from cometbft_client.client.blocks import LegacyEvents, UnifiedEvents, block_event_source
from cometbft_client.rpc.models import ResultBlockResults

_BEGIN = (Event(type="mint"), Event(type="distribution"))
_END = (Event(type="transfer"),)
_FINALIZE = (Event(type="commission"), Event(type="rewards"))


class TestBlockEventSource:
    def test_unified_when_finalize_populated(self) -> None:
        raw = ResultBlockResults(finalize_block_events=_FINALIZE)
        source = block_event_source(raw)
        assert isinstance(source, UnifiedEvents)
        assert source.ordered() == _FINALIZE

    def test_unified_wins_over_legacy(self) -> None:
        raw = ResultBlockResults(
            finalize_block_events=_FINALIZE,
            begin_block_events=_BEGIN,
            end_block_events=_END,
        )
        source = block_event_source(raw)
        assert isinstance(source, UnifiedEvents)
        assert source.ordered() == _FINALIZE

    def test_legacy_when_finalize_absent(self) -> None:
        raw = ResultBlockResults(begin_block_events=_BEGIN, end_block_events=_END)
        source = block_event_source(raw)
        assert source == LegacyEvents(begin_block=_BEGIN, end_block=_END)
        assert [e.type for e in source.ordered()] == ["mint", "distribution", "transfer"]

    def test_legacy_when_finalize_empty(self) -> None:
        raw = ResultBlockResults(
            finalize_block_events=(), begin_block_events=_BEGIN, end_block_events=None
        )
        source = block_event_source(raw)
        assert isinstance(source, LegacyEvents)
        assert source.ordered() == _BEGIN

    def test_nothing_populated(self) -> None:
        source = block_event_source(ResultBlockResults())
        assert source == LegacyEvents()
        assert source.ordered() == ()
