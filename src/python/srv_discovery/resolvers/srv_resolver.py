"""Abstract base class for SRV resolvers.

A resolver answers one SRV query. Concrete resolvers wrap a single name
server or the system configuration; :class:`CompositeSrvResolver` puts
several of them behind the same interface.
"""

from __future__ import annotations

import abc

import dns.name

from ..models import SrvRecord


class SrvResolver(abc.ABC):
    """Interface that answers SRV queries."""

    use_tcp: bool = False
    """Whether queries are sent over TCP instead of UDP."""

    @abc.abstractmethod
    def resolve_srv(self, name: dns.name.Name) -> list[SrvRecord]:
        """Return the SRV records published for *name*.

        A name that does not exist, or has no SRV records, yields an empty
        list.

        Raises:
            dns.exception.DNSException: If the name server could not
                produce an answer (timeout, refused, unreachable).
        """
        ...


def records_from_answer(answer) -> list[SrvRecord]:
    """Convert a dnspython SRV answer into :class:`SrvRecord` models."""
    if answer is None or answer.rrset is None:
        return []
    return [
        SrvRecord(
            target=rdata.target.to_text(),
            port=rdata.port,
            priority=rdata.priority,
            weight=rdata.weight,
        )
        for rdata in answer.rrset
    ]
