"""SRV resolver bound to a single configured name server."""

from __future__ import annotations

import logging
from typing import Callable

import dns.name
import dns.rdatatype
import dns.resolver

from ..models import DnsProtocol, ResolverEndpoint, SrvRecord
from ..network.host_resolution import resolve_host
from .srv_resolver import SrvResolver, records_from_answer

logger = logging.getLogger(__name__)


class NameServerResolver(SrvResolver):
    """Queries exactly one name server, ignoring ``/etc/resolv.conf``.

    Parameters:
        endpoint:
            The name server to query. Its host is resolved to an IP once,
            at construction.
        host_resolver:
            Forward lookup used for the name server host.

    TCP is used when the endpoint protocol is TCP. A composite owning this
    resolver overrides it through ``use_tcp``.

    Raises:
        HostResolutionError: If the endpoint host cannot be resolved.
    """

    def __init__(
        self,
        endpoint: ResolverEndpoint,
        host_resolver: Callable[[str], str] = resolve_host,
    ) -> None:
        self._endpoint = endpoint
        self.use_tcp = endpoint.protocol == DnsProtocol.TCP
        self._nameserver_ip = host_resolver(endpoint.host)

        self._resolver = dns.resolver.Resolver(configure=False)
        # Port must be set before the nameservers list, which captures it
        if endpoint.port is not None and endpoint.port > 0:
            self._resolver.port = endpoint.port
        self._resolver.nameservers = [self._nameserver_ip]

    @property
    def endpoint(self) -> ResolverEndpoint:
        return self._endpoint

    @property
    def nameserver_ip(self) -> str:
        return self._nameserver_ip

    def resolve_srv(self, name: dns.name.Name) -> list[SrvRecord]:
        try:
            answer = self._resolver.resolve(
                name,
                dns.rdatatype.SRV,
                tcp=self.use_tcp,
                raise_on_no_answer=False,
            )
        except dns.resolver.NXDOMAIN:
            logger.debug("%s: no such name %s", self, name)
            return []
        return records_from_answer(answer)

    def __repr__(self) -> str:
        return f"NameServerResolver({self._endpoint}, ip={self._nameserver_ip}, tcp={self.use_tcp})"
