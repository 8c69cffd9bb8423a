"""Tests for error classes."""

from __future__ import annotations

import pytest

from cometbft_client.errors import CometClientError, EventDecodeError, RPCError, TransportError

# ---------------------------------------------------------------------------
# CometClientError base class
# ---------------------------------------------------------------------------


class TestCometClientError:
    def test_default_attributes(self) -> None:
        err = CometClientError("something broke")
        assert str(err) == "something broke"
        assert err.message == "something broke"
        assert err.code == "client-error"

    def test_custom_code(self) -> None:
        err = CometClientError("bad", code="bad-thing")
        assert err.code == "bad-thing"

    def test_is_exception(self) -> None:
        with pytest.raises(CometClientError, match="boom"):
            raise CometClientError("boom")


# ---------------------------------------------------------------------------
# RPCError / TransportError / EventDecodeError
# ---------------------------------------------------------------------------


class TestRPCError:
    def test_defaults(self) -> None:
        err = RPCError("RPC tx error: not found", operation="tx")
        assert isinstance(err, CometClientError)
        assert err.code == "rpc-error"
        assert err.operation == "tx"
        assert err.rpc_code is None
        assert err.data == ""

    def test_node_detail(self) -> None:
        err = RPCError("x", operation="tx", rpc_code=-32603, data="tx (ABCD) not found")
        assert err.rpc_code == -32603
        assert err.data == "tx (ABCD) not found"


class TestTransportError:
    def test_defaults(self) -> None:
        err = TransportError("RPC status failed: timeout", operation="status")
        assert isinstance(err, CometClientError)
        assert err.code == "transport-error"
        assert err.operation == "status"
        assert err.status_code is None

    def test_status_code(self) -> None:
        err = TransportError("x", operation="block", status_code=503)
        assert err.status_code == 503


class TestEventDecodeError:
    def test_defaults(self) -> None:
        err = EventDecodeError("cannot decode '1_0!'")
        assert isinstance(err, CometClientError)
        assert err.code == "event-decode-error"
