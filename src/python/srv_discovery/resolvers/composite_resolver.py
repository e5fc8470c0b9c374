"""Composite resolver that spreads a query across several name servers."""

from __future__ import annotations

import logging
from typing import Sequence

import dns.exception
import dns.name

from ..models import SrvRecord
from .srv_resolver import SrvResolver

logger = logging.getLogger(__name__)


class CompositeSrvResolver(SrvResolver):
    """Queries name servers in order, falling back to the next on failure.

    The first resolver that produces an answer wins, including an empty
    one. A query only fails when every resolver fails, in which case the
    last error is raised.

    Parameters:
        resolvers:
            Non-empty sequence of resolvers, tried in the given order.
        use_tcp:
            Applied to every child resolver.

    Raises:
        ValueError: If *resolvers* is empty.
    """

    def __init__(self, resolvers: Sequence[SrvResolver], use_tcp: bool = False) -> None:
        if not resolvers:
            raise ValueError("CompositeSrvResolver requires at least one resolver")
        self._resolvers: tuple[SrvResolver, ...] = tuple(resolvers)
        self.use_tcp = use_tcp

    @property
    def use_tcp(self) -> bool:
        return self._use_tcp

    @use_tcp.setter
    def use_tcp(self, value: bool) -> None:
        self._use_tcp = value
        for resolver in self._resolvers:
            resolver.use_tcp = value

    @property
    def resolvers(self) -> tuple[SrvResolver, ...]:
        return self._resolvers

    def __len__(self) -> int:
        return len(self._resolvers)

    def resolve_srv(self, name: dns.name.Name) -> list[SrvRecord]:
        *fallbacks, last = self._resolvers
        for resolver in fallbacks:
            try:
                return resolver.resolve_srv(name)
            except dns.exception.DNSException as e:
                logger.warning("Resolver %r failed for %s: %s", resolver, name, e)
        return last.resolve_srv(name)

    def __repr__(self) -> str:
        return f"CompositeSrvResolver({list(self._resolvers)!r}, tcp={self._use_tcp})"
