"""RPCTransport — the method-call interface the client facade consumes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from cometbft_client.rpc.models import (
        ABCIQueryOptions,
        ResultABCIInfo,
        ResultABCIQuery,
        ResultBlockResults,
        ResultTx,
        ResultTxSearch,
    )


class RPCTransport(Protocol):
    """Protocol for CometBFT RPC transport implementations.

    Every method performs one RPC call and either returns its decoded result
    or raises. Methods without a typed result return the node's JSON
    ``result`` object as a dict.
    """

    async def connect(self) -> None: ...
    async def close(self) -> None: ...

    async def block_results(self, height: int | None = None) -> ResultBlockResults: ...
    async def tx(self, hash: bytes, prove: bool = False) -> ResultTx: ...
    async def tx_search(
        self,
        query: str,
        prove: bool = False,
        page: int | None = None,
        per_page: int | None = None,
        order_by: str = "",
    ) -> ResultTxSearch: ...

    async def status(self) -> dict[str, Any]: ...
    async def commit(self, height: int | None = None) -> dict[str, Any]: ...
    async def validators(
        self,
        height: int | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> dict[str, Any]: ...
    async def block(self, height: int | None = None) -> dict[str, Any]: ...
    async def block_by_hash(self, hash: bytes) -> dict[str, Any]: ...
    async def block_search(
        self,
        query: str,
        page: int | None = None,
        per_page: int | None = None,
        order_by: str = "",
    ) -> dict[str, Any]: ...
    async def blockchain_info(self, min_height: int, max_height: int) -> dict[str, Any]: ...

    async def broadcast_tx_async(self, tx: bytes) -> dict[str, Any]: ...
    async def broadcast_tx_sync(self, tx: bytes) -> dict[str, Any]: ...
    async def broadcast_tx_commit(self, tx: bytes) -> dict[str, Any]: ...
    async def check_tx(self, tx: bytes) -> dict[str, Any]: ...

    async def abci_info(self) -> ResultABCIInfo: ...
    async def abci_query_with_options(
        self, path: str, data: bytes, opts: ABCIQueryOptions
    ) -> ResultABCIQuery: ...

    async def health(self) -> dict[str, Any]: ...
    async def net_info(self) -> dict[str, Any]: ...
    async def genesis(self) -> dict[str, Any]: ...
    async def genesis_chunked(self, chunk: int) -> dict[str, Any]: ...
    async def consensus_params(self, height: int | None = None) -> dict[str, Any]: ...
    async def consensus_state(self) -> dict[str, Any]: ...
    async def dump_consensus_state(self) -> dict[str, Any]: ...
    async def num_unconfirmed_txs(self) -> dict[str, Any]: ...
    async def unconfirmed_txs(self, limit: int | None = None) -> dict[str, Any]: ...
