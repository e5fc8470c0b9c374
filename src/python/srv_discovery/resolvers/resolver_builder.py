"""Builds the composite resolver from configured name-server endpoints."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..exceptions import HostResolutionError, ResolverConfigurationError
from ..models import DnsProtocol, ResolverEndpoint
from ..network.host_resolution import resolve_host
from .composite_resolver import CompositeSrvResolver
from .name_server_resolver import NameServerResolver
from .srv_resolver import SrvResolver

logger = logging.getLogger(__name__)

DEFAULT_DNS_PORT = 53


def is_tcp(protocol: str) -> bool:
    return protocol == "tcp"


def parse_endpoint(address: str, protocol: str = "tcp") -> ResolverEndpoint:
    """Split ``host[:port]`` on the first colon.

    A port that is not an integer is logged and dropped, so the endpoint
    falls back to the standard DNS port.
    """
    host, _, port_str = address.strip().partition(":")
    port: int | None = None
    if port_str:
        try:
            port = int(port_str)
        except ValueError:
            logger.info(
                "Resolver port '%s' is not an integer. Using default port %d",
                port_str,
                DEFAULT_DNS_PORT,
            )
    if port is not None and port <= 0:
        port = None
    return ResolverEndpoint(
        host=host,
        port=port,
        protocol=DnsProtocol.TCP if is_tcp(protocol) else DnsProtocol.UDP,
    )


def build_resolver(
    servers: Optional[Sequence[str]],
    protocol: str = "tcp",
    host_resolver: Callable[[str], str] = resolve_host,
) -> Optional[SrvResolver]:
    """Build one resolver that covers every usable configured name server.

    Args:
        servers: ``host[:port]`` entries. ``None`` means no servers were
            configured and the system default resolver should be used.
        protocol: ``"tcp"`` enables TCP on the composite, anything else
            keeps UDP.
        host_resolver: Forward lookup for name server hosts.

    Returns:
        The composite resolver, or ``None`` when the system default
        resolver should be used.

    Raises:
        ResolverConfigurationError: If servers were configured but none
            of them produced a resolver.
    """
    if servers is None:
        logger.info("No name servers configured. Using default resolver.")
        return None

    resolvers: list[SrvResolver] = []
    for address in servers:
        endpoint = parse_endpoint(address, protocol)
        if not endpoint.host:
            logger.info("Skipping resolver entry '%s' without a host", address)
            continue
        try:
            logger.info("Trying to resolve '%s'", endpoint.host)
            resolvers.append(NameServerResolver(endpoint, host_resolver=host_resolver))
        except HostResolutionError as e:
            logger.info("Could not create resolver for '%s': %s", address, e)

    if not resolvers:
        raise ResolverConfigurationError(list(servers))

    logger.info("Trying to discover hosts with a list of %d resolvers", len(resolvers))
    try:
        return CompositeSrvResolver(resolvers, use_tcp=is_tcp(protocol))
    except (ValueError, OSError) as e:
        logger.info("Could not create resolver. Using default resolver. %s", e)
        return None
