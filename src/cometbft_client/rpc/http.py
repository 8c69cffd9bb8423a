"""CometBFT JSON-RPC over HTTP.

Async HTTP transport posting JSON-RPC 2.0 requests to a node's RPC listener
(``POST /``). Parameter encoding follows the node's JSON codec:

- ``int64`` values (heights) are sent as strings
- ``[]byte`` values (transactions, hashes) are sent as base64
- ABCI query data is sent as hex
"""

from __future__ import annotations

import binascii
import itertools
import logging
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from cometbft_client.errors.rpc_errors import RPCError, TransportError
from cometbft_client.rpc.models import (
    ResultABCIInfo,
    ResultABCIQuery,
    ResultBlockResults,
    ResultTx,
    ResultTxSearch,
)
from cometbft_client.utils.encoding import encode_base64

if TYPE_CHECKING:
    from collections.abc import Callable

    from cometbft_client.config.settings import RPCConfig
    from cometbft_client.rpc.models import ABCIQueryOptions

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


def _int64(value: int | None) -> str | None:
    return None if value is None else str(value)


class HTTPTransport:
    """Async JSON-RPC client for a CometBFT node.

    Usage::

        transport = HTTPTransport(config)
        await transport.connect()
        try:
            results = await transport.block_results(100)
        finally:
            await transport.close()
    """

    def __init__(self, config: RPCConfig) -> None:
        """Initialize the transport.

        Args:
            config: RPC configuration (url, timeout, headers).
        """
        self._config = config
        self._client: httpx.AsyncClient | None = None
        self._ids = itertools.count(1)

    async def connect(self) -> None:
        """Create the underlying HTTP client."""
        headers: dict[str, str] = {"Content-Type": "application/json"}
        headers.update(self._config.headers)

        self._client = httpx.AsyncClient(
            base_url=self._config.url.rstrip("/"),
            headers=headers,
            timeout=self._config.timeout,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @property
    def is_connected(self) -> bool:
        """Check if the HTTP client is active."""
        return self._client is not None

    # ------------------------------------------------------------------
    # Typed results
    # ------------------------------------------------------------------

    async def block_results(self, height: int | None = None) -> ResultBlockResults:
        result = await self.call("block_results", height=_int64(height))
        return self._decode("block_results", ResultBlockResults.from_dict, result)

    async def tx(self, hash: bytes, prove: bool = False) -> ResultTx:
        result = await self.call("tx", hash=encode_base64(hash), prove=prove)
        return self._decode("tx", ResultTx.from_dict, result)

    async def tx_search(
        self,
        query: str,
        prove: bool = False,
        page: int | None = None,
        per_page: int | None = None,
        order_by: str = "",
    ) -> ResultTxSearch:
        result = await self.call(
            "tx_search",
            query=query,
            prove=prove,
            page=page,
            per_page=per_page,
            order_by=order_by,
        )
        return self._decode("tx_search", ResultTxSearch.from_dict, result)

    async def abci_info(self) -> ResultABCIInfo:
        result = await self.call("abci_info")
        return self._decode("abci_info", ResultABCIInfo.from_dict, result)

    async def abci_query_with_options(
        self, path: str, data: bytes, opts: ABCIQueryOptions
    ) -> ResultABCIQuery:
        result = await self.call(
            "abci_query",
            path=path,
            data=data.hex(),
            height=_int64(opts.height),
            prove=opts.prove,
        )
        return self._decode("abci_query", ResultABCIQuery.from_dict, result)

    # ------------------------------------------------------------------
    # Plain results
    # ------------------------------------------------------------------

    async def status(self) -> dict[str, Any]:
        return await self.call("status")

    async def commit(self, height: int | None = None) -> dict[str, Any]:
        return await self.call("commit", height=_int64(height))

    async def validators(
        self,
        height: int | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> dict[str, Any]:
        return await self.call(
            "validators", height=_int64(height), page=page, per_page=per_page
        )

    async def block(self, height: int | None = None) -> dict[str, Any]:
        return await self.call("block", height=_int64(height))

    async def block_by_hash(self, hash: bytes) -> dict[str, Any]:
        return await self.call("block_by_hash", hash=encode_base64(hash))

    async def block_search(
        self,
        query: str,
        page: int | None = None,
        per_page: int | None = None,
        order_by: str = "",
    ) -> dict[str, Any]:
        return await self.call(
            "block_search", query=query, page=page, per_page=per_page, order_by=order_by
        )

    async def blockchain_info(self, min_height: int, max_height: int) -> dict[str, Any]:
        return await self.call(
            "blockchain", minHeight=_int64(min_height), maxHeight=_int64(max_height)
        )

    async def broadcast_tx_async(self, tx: bytes) -> dict[str, Any]:
        return await self.call("broadcast_tx_async", tx=encode_base64(tx))

    async def broadcast_tx_sync(self, tx: bytes) -> dict[str, Any]:
        return await self.call("broadcast_tx_sync", tx=encode_base64(tx))

    async def broadcast_tx_commit(self, tx: bytes) -> dict[str, Any]:
        return await self.call("broadcast_tx_commit", tx=encode_base64(tx))

    async def check_tx(self, tx: bytes) -> dict[str, Any]:
        return await self.call("check_tx", tx=encode_base64(tx))

    async def health(self) -> dict[str, Any]:
        return await self.call("health")

    async def net_info(self) -> dict[str, Any]:
        return await self.call("net_info")

    async def genesis(self) -> dict[str, Any]:
        return await self.call("genesis")

    async def genesis_chunked(self, chunk: int) -> dict[str, Any]:
        return await self.call("genesis_chunked", chunk=chunk)

    async def consensus_params(self, height: int | None = None) -> dict[str, Any]:
        return await self.call("consensus_params", height=_int64(height))

    async def consensus_state(self) -> dict[str, Any]:
        return await self.call("consensus_state")

    async def dump_consensus_state(self) -> dict[str, Any]:
        return await self.call("dump_consensus_state")

    async def num_unconfirmed_txs(self) -> dict[str, Any]:
        return await self.call("num_unconfirmed_txs")

    async def unconfirmed_txs(self, limit: int | None = None) -> dict[str, Any]:
        return await self.call("unconfirmed_txs", limit=limit)

    # ------------------------------------------------------------------
    # JSON-RPC
    # ------------------------------------------------------------------

    async def call(self, method: str, **params: Any) -> dict[str, Any]:
        """Invoke a JSON-RPC method and return its ``result`` object.

        ``None``-valued params are omitted.

        Raises:
            RPCError: If the node returned a JSON-RPC error.
            TransportError: On network errors, non-2xx responses or
                malformed bodies.
        """
        client = self._ensure_connected(method)
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": {k: v for k, v in params.items() if v is not None},
        }
        logger.debug("RPC request %s id=%s", method, payload["id"])

        try:
            response = await client.post("/", json=payload)
        except httpx.HTTPError as exc:
            msg = f"RPC {method} failed: {exc}"
            raise TransportError(msg, operation=method) from exc

        try:
            body = response.json()
        except ValueError as exc:
            msg = f"RPC {method} returned a non-JSON body ({response.status_code})"
            raise TransportError(
                msg, operation=method, status_code=response.status_code
            ) from exc

        if isinstance(body, dict) and body.get("error"):
            raise self._rpc_error(method, body["error"])

        if not response.is_success:
            msg = f"RPC {method} failed ({response.status_code}): {response.text}"
            raise TransportError(msg, operation=method, status_code=response.status_code)

        result = body.get("result") if isinstance(body, dict) else None
        if not isinstance(result, dict):
            msg = f"RPC {method} response has no result object"
            raise TransportError(msg, operation=method, status_code=response.status_code)
        return result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _ensure_connected(self, method: str) -> httpx.AsyncClient:
        """Return the HTTP client, raising if not connected."""
        if self._client is None:
            msg = "RPC transport not connected. Call connect() first."
            raise TransportError(msg, operation=method)
        return self._client

    @staticmethod
    def _rpc_error(method: str, error: Any) -> RPCError:
        if not isinstance(error, dict):
            return RPCError(f"RPC {method} error: {error}", operation=method)
        message = error.get("message", "unknown error")
        data = error.get("data", "")
        detail = f"{message}: {data}" if data else message
        return RPCError(
            f"RPC {method} error: {detail}",
            operation=method,
            rpc_code=error.get("code"),
            data=data,
        )

    @staticmethod
    def _decode(method: str, parser: Callable[[dict[str, Any]], _T], result: dict[str, Any]) -> _T:
        try:
            return parser(result)
        except (binascii.Error, ValueError, TypeError, AttributeError) as exc:
            msg = f"RPC {method} returned a malformed result: {exc}"
            raise TransportError(msg, operation=method) from exc
