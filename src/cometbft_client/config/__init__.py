"""Client configuration."""

from cometbft_client.config.settings import ClientConfig, RPCConfig

__all__ = ["ClientConfig", "RPCConfig"]
