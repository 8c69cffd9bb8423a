"""Tests for the CometClient facade — canned transport and HTTP end-to-end."""

from __future__ import annotations

import inspect
import json
from unittest.mock import AsyncMock

import httpx
import pytest

from cometbft_client.abci.types import Event, EventAttribute, ExecTxResult
from cometbft_client.client.client import CometClient
from cometbft_client.client.events import Attribute
from cometbft_client.client.response import BlockResponse, TxResponse
from cometbft_client.config.settings import ClientConfig, RPCConfig
from cometbft_client.errors.rpc_errors import RPCError, TransportError
from cometbft_client.rpc.http import HTTPTransport
from cometbft_client.rpc.transport import RPCTransport
from cometbft_client.rpc.models import (
    DEFAULT_ABCI_QUERY_OPTIONS,
    ABCIQueryOptions,
    ResultABCIQuery,
    ResultBlockResults,
    ResultTx,
    ResultTxSearch,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _mint_event(value: str) -> Event:
    return Event(
        type="mint",
        attributes=(EventAttribute(key="YW1vdW50", value=value, index=True),),
    )


def _client() -> tuple[CometClient, AsyncMock]:
    transport = AsyncMock(spec=HTTPTransport)
    return CometClient(transport), transport


# ---------------------------------------------------------------------------
# Construction / lifecycle
# ---------------------------------------------------------------------------


class TestCometClientLifecycle:
    def test_from_url(self) -> None:
        client = CometClient.from_url("https://rpc.example.com:443", timeout=3.0)
        assert isinstance(client.transport, HTTPTransport)
        assert client.transport._config.url == "https://rpc.example.com:443"
        assert client.transport._config.timeout == 3.0

    def test_from_config(self, client_config: ClientConfig) -> None:
        client = CometClient.from_config(client_config)
        assert isinstance(client.transport, HTTPTransport)
        assert client.transport._config is client_config.rpc

    async def test_context_manager_connects_and_closes(self) -> None:
        client, transport = _client()
        async with client as entered:
            assert entered is client
            transport.connect.assert_awaited_once()
            transport.close.assert_not_awaited()
        transport.close.assert_awaited_once()

    async def test_context_manager_closes_on_error(self) -> None:
        client, transport = _client()
        with pytest.raises(RuntimeError):
            async with client:
                raise RuntimeError("boom")
        transport.close.assert_awaited_once()


# ---------------------------------------------------------------------------
# Reshaped operations
# ---------------------------------------------------------------------------


class TestReshapedOperations:
    async def test_block_results_legacy_mint(self) -> None:
        client, transport = _client()
        transport.block_results.return_value = ResultBlockResults(
            height=5, begin_block_events=(_mint_event("MTAw"),), end_block_events=()
        )

        res = await client.block_results(5)

        transport.block_results.assert_awaited_once_with(5)
        assert isinstance(res, BlockResponse)
        assert res.events[0].type == "mint"
        assert res.events[0].attributes == (Attribute(key="amount", value="100", index=True),)

    async def test_block_results_latest(self) -> None:
        client, transport = _client()
        transport.block_results.return_value = ResultBlockResults()

        await client.block_results()
        transport.block_results.assert_awaited_once_with(None)

    async def test_tx(self) -> None:
        client, transport = _client()
        transport.tx.return_value = ResultTx(
            hash=b"\xab",
            height=8,
            index=1,
            tx_result=ExecTxResult(code=5, events=(_mint_event("1_0!"),)),
        )

        res = await client.tx(b"\xab", prove=True)

        transport.tx.assert_awaited_once_with(b"\xab", True)
        assert isinstance(res, TxResponse)
        assert res.exec_tx.is_ok() is False
        assert res.exec_tx.events[0].attributes[0].value == "1_0!"

    async def test_tx_search(self) -> None:
        client, transport = _client()
        transport.tx_search.return_value = ResultTxSearch(
            txs=(ResultTx(height=2), ResultTx(height=1)), total_count=2
        )

        query = "message.sender='cosmos1'"
        res = await client.tx_search(query, page=1, per_page=30, order_by="desc")

        transport.tx_search.assert_awaited_once_with(query, False, 1, 30, "desc")
        assert [tx.height for tx in res] == [2, 1]


# ---------------------------------------------------------------------------
# Pass-through operations
# ---------------------------------------------------------------------------


class TestPassThrough:
    @pytest.mark.parametrize(
        ("method", "args"),
        [
            ("status", ()),
            ("commit", (10,)),
            ("validators", (10, 1, 5)),
            ("block", (10,)),
            ("block_by_hash", (b"\x01",)),
            ("block_search", ("block.height > 5", 1, 10, "asc")),
            ("blockchain_info", (1, 20)),
            ("broadcast_tx_async", (b"tx",)),
            ("broadcast_tx_sync", (b"tx",)),
            ("broadcast_tx_commit", (b"tx",)),
            ("check_tx", (b"tx",)),
            ("abci_info", ()),
            ("health", ()),
            ("net_info", ()),
            ("genesis", ()),
            ("genesis_chunked", (1,)),
            ("consensus_params", (10,)),
            ("consensus_state", ()),
            ("dump_consensus_state", ()),
            ("num_unconfirmed_txs", ()),
            ("unconfirmed_txs", (5,)),
        ],
    )
    async def test_forwards_and_returns_unchanged(self, method: str, args: tuple) -> None:
        client, transport = _client()
        sentinel = {"method": method}
        getattr(transport, method).return_value = sentinel

        result = await getattr(client, method)(*args)

        assert result is sentinel
        getattr(transport, method).assert_awaited_once_with(*args)

    async def test_abci_query_uses_default_options(self) -> None:
        client, transport = _client()
        expected = ResultABCIQuery()
        transport.abci_query_with_options.return_value = expected

        result = await client.abci_query("/store/bank/key", b"\x01")

        assert result is expected
        transport.abci_query_with_options.assert_awaited_once_with(
            "/store/bank/key", b"\x01", DEFAULT_ABCI_QUERY_OPTIONS
        )

    async def test_abci_query_with_options(self) -> None:
        client, transport = _client()
        opts = ABCIQueryOptions(height=7, prove=True)

        await client.abci_query_with_options("/p", b"", opts)
        transport.abci_query_with_options.assert_awaited_once_with("/p", b"", opts)

    def test_canned_transport_rejects_unknown_methods(self) -> None:
        _, transport = _client()
        with pytest.raises(AttributeError):
            _ = transport.subscribe

    def test_http_transport_implements_every_protocol_method(self) -> None:
        names = [n for n, v in vars(RPCTransport).items() if inspect.iscoroutinefunction(v)]
        assert "block_results" in names
        for name in names:
            assert inspect.iscoroutinefunction(getattr(HTTPTransport, name)), name
            assert inspect.iscoroutinefunction(getattr(CometClient, name)), name


# ---------------------------------------------------------------------------
# Error propagation
# ---------------------------------------------------------------------------


class TestErrorPropagation:
    async def test_reshaping_operation_propagates_transport_error(self) -> None:
        client, transport = _client()
        err = TransportError("RPC block_results failed: timeout", operation="block_results")
        transport.block_results.side_effect = err

        with pytest.raises(TransportError) as exc_info:
            await client.block_results(1)
        assert exc_info.value is err

    async def test_pass_through_propagates_rpc_error(self) -> None:
        client, transport = _client()
        err = RPCError("RPC commit error: height too high", operation="commit", rpc_code=-32603)
        transport.commit.side_effect = err

        with pytest.raises(RPCError) as exc_info:
            await client.commit(10**9)
        assert exc_info.value is err
        assert exc_info.value.operation == "commit"


# ---------------------------------------------------------------------------
# End-to-end over mocked HTTP
# ---------------------------------------------------------------------------


class TestHTTPEndToEnd:
    async def test_block_results_from_v038_node(self) -> None:
        payload = {
            "height": "20000000",
            "txs_results": [
                {
                    "code": 0,
                    "gas_wanted": "150000",
                    "gas_used": "98000",
                    "events": [
                        {
                            "type": "message",
                            "attributes": [
                                {
                                    "key": "action",
                                    "value": "/cosmos.bank.v1beta1.MsgSend",
                                    "index": True,
                                }
                            ],
                        }
                    ],
                }
            ],
            "finalize_block_events": [
                {"type": "mint", "attributes": [{"key": "amount", "value": "100", "index": True}]}
            ],
            "begin_block_events": [
                {"type": "ignored", "attributes": [{"key": "YW1vdW50", "value": "MTAw"}]}
            ],
            "validator_updates": None,
            "app_hash": "3q2+7w==",
        }

        def handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            assert body["method"] == "block_results"
            assert body["params"] == {"height": "20000000"}
            return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": payload})

        client = CometClient(HTTPTransport(RPCConfig(url="http://node.test:26657")))
        client.transport._client = httpx.AsyncClient(
            transport=httpx.MockTransport(handler), base_url="http://node.test:26657"
        )

        res = await client.block_results(20000000)
        await client.close()

        assert res.height == 20000000
        assert [e.type for e in res.events] == ["mint"]
        assert res.events[0].attributes[0] == Attribute(key="amount", value="100", index=True)
        assert res.tx_responses[0].gas_used == 98000
        assert res.tx_responses[0].events[0].attributes[0].value == "/cosmos.bank.v1beta1.MsgSend"
        assert res.app_hash == b"\xde\xad\xbe\xef"
