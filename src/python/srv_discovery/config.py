"""Configuration model and helpers for SRV discovery."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

DISCOVERY_SRV_QUERY = "discovery.srv.query"
DISCOVERY_SRV_SERVERS = "discovery.srv.servers"
DISCOVERY_SRV_PROTOCOL = "discovery.srv.protocol"
DISCOVERY_SRV_CONSULPOSTFIX = "discovery.srv.consulpostfix"

_SETTINGS_FIELDS = {
    DISCOVERY_SRV_QUERY: "query",
    DISCOVERY_SRV_SERVERS: "servers",
    DISCOVERY_SRV_PROTOCOL: "protocol",
    DISCOVERY_SRV_CONSULPOSTFIX: "consul_postfix",
}


class SrvDiscoveryConfig(BaseModel):
    """Settings consumed by the SRV cluster nodes provider."""

    query: Optional[str] = Field(default=None, description="SRV domain name to query.")
    servers: Optional[List[str]] = Field(
        default=None,
        description="Name servers as 'host[:port]'. None uses the system default resolver.",
    )
    protocol: str = Field(default="tcp", description="'tcp' forces TCP queries, anything else uses UDP.")
    consul_postfix: str = Field(default="", description="Suffix removed from SRV target host names.")

    @field_validator("query", mode="before")
    @classmethod
    def _blank_query_is_unset(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @field_validator("servers", mode="before")
    @classmethod
    def _split_servers(cls, value: Any) -> Optional[List[str]]:
        if value is None:
            return None
        if isinstance(value, str):
            value = value.split(",")
        if not isinstance(value, (list, tuple)):
            return value
        return [str(item).strip() for item in value if str(item).strip()]

    @field_validator("consul_postfix", mode="before")
    @classmethod
    def _none_postfix_is_empty(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "SrvDiscoveryConfig":
        """Build a config from a flat mapping keyed by ``discovery.srv.*`` names."""
        values = {field: settings[key] for key, field in _SETTINGS_FIELDS.items() if key in settings}
        return cls(**values)


def flatten_settings(raw: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten nested mappings into dotted keys; lists are kept as values."""
    flat: dict[str, Any] = {}
    for key, value in raw.items():
        dotted = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten_settings(value, dotted))
        else:
            flat[dotted] = value
    return flat


def load_config(path: Optional[Path]) -> SrvDiscoveryConfig:
    """Load a YAML settings file. Nested and dotted key styles are both accepted."""
    if path is None:
        return SrvDiscoveryConfig()
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at: {path}")
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, Mapping):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")
    config = SrvDiscoveryConfig.from_settings(flatten_settings(raw))
    logger.info("SrvDiscoveryConfig loaded from %s", path)
    return config
