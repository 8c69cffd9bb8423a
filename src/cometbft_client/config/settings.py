"""Client settings loaded from environment variables and config files.

Configuration is loaded from (highest priority first):
1. Environment variables (prefix: ``COMETCLIENT_``, nested via ``__``)
2. YAML config file (``COMETCLIENT_CONFIG_PATH`` env var or ``from_yaml``)
3. Defaults defined here
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# ---------------------------------------------------------------------------
# Sub-config models
# ---------------------------------------------------------------------------


class RPCConfig(BaseSettings):
    """CometBFT node RPC endpoint settings."""

    model_config = SettingsConfigDict(
        env_prefix="COMETCLIENT_RPC__",
        case_sensitive=False,
    )

    url: str = Field(
        default="http://localhost:26657",
        description="Base URL of the node's RPC listener",
    )
    timeout: float = Field(default=5.0, description="Request timeout in seconds")
    headers: dict[str, str] = Field(default_factory=dict)

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        return value


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------


def _load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML configuration file and return its contents as a dict.

    Returns an empty dict if the file doesn't exist or is empty.
    """
    p = Path(path)
    if not p.exists():
        return {}
    text = p.read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    return data if isinstance(data, dict) else {}


class ClientConfig(BaseSettings):
    """Top-level client configuration.

    Loads settings from environment variables (``COMETCLIENT_`` prefix),
    an optional YAML file, and built-in defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="COMETCLIENT_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    config_path: str = ""

    rpc: RPCConfig = Field(default_factory=RPCConfig)

    @model_validator(mode="before")
    @classmethod
    def _merge_yaml(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Merge YAML config file contents under the env var overrides."""
        config_path = values.get("config_path", "")
        if not config_path:
            return values
        yaml_data = _load_yaml(config_path)
        for key, val in yaml_data.items():
            if key not in values or values[key] is None:
                values[key] = val
            elif isinstance(val, dict) and isinstance(values.get(key), dict):
                values[key] = {**val, **values[key]}
        return values

    @classmethod
    def from_yaml(cls, path: str | Path) -> Self:
        """Construct ``ClientConfig`` loading defaults from a YAML file.

        Environment variables still override YAML values.
        """
        return cls(config_path=str(path))
