"""Data models for SRV record discovery.

All models use Pydantic for validation and serialization.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


# ── Enums ─────────────────────────────────────────────────────────


class DnsProtocol(str, enum.Enum):
    """Transport used to talk to a name server."""

    TCP = "tcp"
    UDP = "udp"


# ── Resolver Models ───────────────────────────────────────────────


class ResolverEndpoint(BaseModel):
    """A configured name server, parsed from a ``host[:port]`` entry."""

    model_config = ConfigDict(frozen=True)

    host: str
    """Name server host name or IP address."""

    port: int | None = None
    """Name server port. None = the DNS standard port 53."""

    protocol: DnsProtocol = DnsProtocol.TCP
    """Transport preference for queries sent to this name server."""

    def __str__(self) -> str:
        if self.port is None:
            return self.host
        return f"{self.host}:{self.port}"


class SrvRecord(BaseModel):
    """A single SRV record from a DNS answer."""

    target: str
    """Target host name as returned by DNS (may end with ``.``)."""

    port: int = Field(ge=0, le=65535)
    """Port of the service on the target host."""

    priority: int = 0
    """SRV priority. Carried for logging only."""

    weight: int = 0
    """SRV weight. Carried for logging only."""

    def __str__(self) -> str:
        return f"{self.priority} {self.weight} {self.port} {self.target}"


# ── Node Models ───────────────────────────────────────────────────


class TransportAddress(BaseModel):
    """A connectable address produced by the transport layer."""

    host: str
    """Host name the address was parsed from."""

    ip: str
    """Resolved IP address."""

    port: int
    """TCP port."""

    def __str__(self) -> str:
        return f"{self.host}/{self.ip}:{self.port}"


class DiscoveryNode(BaseModel):
    """A candidate cluster node produced by one discovery cycle."""

    node_id: str
    """Identifier derived from the ``host:port`` string (``#srv-host:port``)."""

    address: TransportAddress
    """Address the membership layer should contact."""

    version: str
    """Version tag of the local system, attached to every node."""

    @property
    def host_port(self) -> str:
        """Return the node's ``host:port`` string."""
        return f"{self.address.host}:{self.address.port}"

    def __str__(self) -> str:
        return f"{{{self.node_id}}}{{{self.address}}}"
