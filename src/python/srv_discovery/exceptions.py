"""Exception hierarchy for SRV record discovery."""

from __future__ import annotations


class SrvDiscoveryError(Exception):
    """Base exception for all SRV discovery errors."""

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(message)


# ── Configuration Errors ──────────────────────────────────────────

class ResolverConfigurationError(SrvDiscoveryError):
    """Raised when no usable resolver could be built from the configured name servers."""

    def __init__(self, servers: list[str] | None = None, message: str = "Unable to find resolvers") -> None:
        self.servers = list(servers or [])
        if self.servers:
            message += f" from servers {self.servers}"
        super().__init__(message)


# ── Query Errors ──────────────────────────────────────────────────

class QueryParseError(SrvDiscoveryError):
    """Raised when the configured SRV query is not a valid DNS name."""

    def __init__(self, query: str, reason: str = "") -> None:
        self.query = query
        msg = f"Unable to parse DNS query '{query}'."
        if reason:
            msg += f" Reason: {reason}"
        super().__init__(msg)


# ── Per-Record Errors ─────────────────────────────────────────────

class HostResolutionError(SrvDiscoveryError):
    """Raised when a hostname cannot be resolved to an IP address."""

    def __init__(self, hostname: str, reason: str = "") -> None:
        self.hostname = hostname
        msg = f"Could not resolve host '{hostname}'."
        if reason:
            msg += f" Reason: {reason}"
        super().__init__(msg)


class AddressParseError(SrvDiscoveryError):
    """Raised when a ``host:port`` string cannot be turned into a transport address."""

    def __init__(self, address: str, reason: str = "") -> None:
        self.address = address
        msg = f"Failed to parse transport address '{address}'."
        if reason:
            msg += f" Reason: {reason}"
        super().__init__(msg)
