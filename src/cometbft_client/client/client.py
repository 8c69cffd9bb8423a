"""CometClient — one call surface for every CometBFT RPC operation.

``block_results``, ``tx`` and ``tx_search`` reshape the node's results into
the stable types of :mod:`cometbft_client.client.response`. Every other method
forwards to the transport and returns its result unchanged. Transport errors
propagate as raised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from cometbft_client.client.response import (
    BlockResponse,
    TxResponse,
    reshape_tx_search,
)
from cometbft_client.config.settings import RPCConfig
from cometbft_client.rpc.http import HTTPTransport
from cometbft_client.rpc.models import DEFAULT_ABCI_QUERY_OPTIONS

if TYPE_CHECKING:
    from types import TracebackType

    from cometbft_client.config.settings import ClientConfig
    from cometbft_client.rpc.models import ABCIQueryOptions, ResultABCIInfo, ResultABCIQuery
    from cometbft_client.rpc.transport import RPCTransport


class CometClient:
    """CometBFT RPC client returning version-independent results.

    Usage::

        async with CometClient.from_url("https://rpc.example.com:443") as client:
            block = await client.block_results(13311684)
            for event in block.events:
                ...
    """

    def __init__(self, transport: RPCTransport) -> None:
        """Initialize the client.

        Args:
            transport: Any object implementing :class:`RPCTransport`.
        """
        self._transport = transport

    @classmethod
    def from_config(cls, config: ClientConfig) -> Self:
        """Build a client over JSON-RPC/HTTP from a :class:`ClientConfig`."""
        return cls(HTTPTransport(config.rpc))

    @classmethod
    def from_url(cls, url: str, timeout: float = 5.0) -> Self:
        """Build a client over JSON-RPC/HTTP for the node at *url*."""
        return cls(HTTPTransport(RPCConfig(url=url, timeout=timeout)))

    async def connect(self) -> None:
        """Open the transport."""
        await self._transport.connect()

    async def close(self) -> None:
        """Close the transport."""
        await self._transport.close()

    async def __aenter__(self) -> Self:
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    @property
    def transport(self) -> RPCTransport:
        """Direct access to the underlying transport."""
        return self._transport

    # ------------------------------------------------------------------
    # Reshaped results
    # ------------------------------------------------------------------

    async def block_results(self, height: int | None = None) -> BlockResponse:
        """Fetch the results of a block and normalise its events.

        Args:
            height: Block height; ``None`` for the latest block.

        Returns:
            BlockResponse with plain-text transaction and block events.
        """
        res = await self._transport.block_results(height)
        return BlockResponse.from_result(res)

    async def tx(self, hash: bytes, prove: bool = False) -> TxResponse:
        """Look up a committed transaction by hash.

        Args:
            hash: Transaction hash.
            prove: Include an inclusion proof.

        Returns:
            TxResponse with plain-text events.
        """
        res = await self._transport.tx(hash, prove)
        return TxResponse.from_result(res)

    async def tx_search(
        self,
        query: str,
        prove: bool = False,
        page: int | None = None,
        per_page: int | None = None,
        order_by: str = "",
    ) -> list[TxResponse]:
        """Search committed transactions by event query.

        Args:
            query: Event query, e.g. ``"tx.height=5"``.
            prove: Include inclusion proofs.
            page: 1-based page number.
            per_page: Results per page.
            order_by: ``"asc"`` or ``"desc"``; empty for the node default.

        Returns:
            TxResponses in the order returned by the node.
        """
        res = await self._transport.tx_search(query, prove, page, per_page, order_by)
        return reshape_tx_search(res)

    # ------------------------------------------------------------------
    # Pass-through
    # ------------------------------------------------------------------

    async def status(self) -> dict[str, Any]:
        return await self._transport.status()

    async def commit(self, height: int | None = None) -> dict[str, Any]:
        return await self._transport.commit(height)

    async def validators(
        self,
        height: int | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> dict[str, Any]:
        return await self._transport.validators(height, page, per_page)

    async def block(self, height: int | None = None) -> dict[str, Any]:
        return await self._transport.block(height)

    async def block_by_hash(self, hash: bytes) -> dict[str, Any]:
        return await self._transport.block_by_hash(hash)

    async def block_search(
        self,
        query: str,
        page: int | None = None,
        per_page: int | None = None,
        order_by: str = "",
    ) -> dict[str, Any]:
        return await self._transport.block_search(query, page, per_page, order_by)

    async def blockchain_info(self, min_height: int, max_height: int) -> dict[str, Any]:
        return await self._transport.blockchain_info(min_height, max_height)

    async def broadcast_tx_async(self, tx: bytes) -> dict[str, Any]:
        return await self._transport.broadcast_tx_async(tx)

    async def broadcast_tx_sync(self, tx: bytes) -> dict[str, Any]:
        return await self._transport.broadcast_tx_sync(tx)

    async def broadcast_tx_commit(self, tx: bytes) -> dict[str, Any]:
        return await self._transport.broadcast_tx_commit(tx)

    async def check_tx(self, tx: bytes) -> dict[str, Any]:
        return await self._transport.check_tx(tx)

    async def abci_info(self) -> ResultABCIInfo:
        return await self._transport.abci_info()

    async def abci_query(self, path: str, data: bytes) -> ResultABCIQuery:
        """Query the application at the latest height without a proof."""
        return await self._transport.abci_query_with_options(
            path, data, DEFAULT_ABCI_QUERY_OPTIONS
        )

    async def abci_query_with_options(
        self, path: str, data: bytes, opts: ABCIQueryOptions
    ) -> ResultABCIQuery:
        return await self._transport.abci_query_with_options(path, data, opts)

    async def health(self) -> dict[str, Any]:
        return await self._transport.health()

    async def net_info(self) -> dict[str, Any]:
        return await self._transport.net_info()

    async def genesis(self) -> dict[str, Any]:
        return await self._transport.genesis()

    async def genesis_chunked(self, chunk: int) -> dict[str, Any]:
        return await self._transport.genesis_chunked(chunk)

    async def consensus_params(self, height: int | None = None) -> dict[str, Any]:
        return await self._transport.consensus_params(height)

    async def consensus_state(self) -> dict[str, Any]:
        return await self._transport.consensus_state()

    async def dump_consensus_state(self) -> dict[str, Any]:
        return await self._transport.dump_consensus_state()

    async def num_unconfirmed_txs(self) -> dict[str, Any]:
        return await self._transport.num_unconfirmed_txs()

    async def unconfirmed_txs(self, limit: int | None = None) -> dict[str, Any]:
        return await self._transport.unconfirmed_txs(limit)
