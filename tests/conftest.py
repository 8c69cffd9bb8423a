"""Shared test fixtures for the cometbft-client test suite."""

from __future__ import annotations

import pytest

from cometbft_client.config.settings import ClientConfig, RPCConfig


@pytest.fixture
def rpc_config() -> RPCConfig:
    """Provide an RPCConfig pointing at a fake node."""
    return RPCConfig(url="http://node.test:26657", timeout=2.0)


@pytest.fixture
def client_config(rpc_config: RPCConfig) -> ClientConfig:
    """Provide a ClientConfig wired to the fake node."""
    return ClientConfig(rpc=rpc_config)
