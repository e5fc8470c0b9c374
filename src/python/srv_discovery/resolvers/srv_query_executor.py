"""Runs the configured SRV lookup and normalizes its result."""

from __future__ import annotations

import logging
from typing import Optional

import dns.exception
import dns.name

from ..config import DISCOVERY_SRV_QUERY
from ..exceptions import QueryParseError
from ..models import SrvRecord
from .srv_resolver import SrvResolver
from .system_resolver import SystemSrvResolver

logger = logging.getLogger(__name__)


def parse_query(query: str) -> dns.name.Name:
    """Parse *query* into an absolute DNS name.

    Raises:
        QueryParseError: If the query is not valid DNS name syntax.
    """
    try:
        return dns.name.from_text(query)
    except dns.exception.DNSException as e:
        raise QueryParseError(query, str(e) or e.__class__.__name__) from e


class SrvQueryExecutor:
    """Issues one SRV lookup per call.

    Parameters:
        resolver:
            The composite resolver built from configuration, or ``None`` to
            use *system_resolver*.
        system_resolver:
            Fallback resolver. Defaults to the system DNS configuration.
    """

    def __init__(
        self,
        resolver: Optional[SrvResolver] = None,
        system_resolver: Optional[SrvResolver] = None,
    ) -> None:
        self._resolver = resolver
        self._system_resolver = system_resolver or SystemSrvResolver()

    @property
    def active_resolver(self) -> SrvResolver:
        return self._resolver if self._resolver is not None else self._system_resolver

    def lookup(self, query: Optional[str]) -> list[SrvRecord]:
        """Return the SRV records for *query*, never ``None``.

        An unset query is logged and yields an empty list without touching
        DNS. Lookup failures yield an empty list as well.

        Raises:
            QueryParseError: If *query* is malformed.
        """
        if not query:
            logger.error("DNS query must not be empty. Please set '%s'", DISCOVERY_SRV_QUERY)
            return []

        logger.info("lookup_records: trying to find %s", query)
        name = parse_query(query)
        try:
            records = self.active_resolver.resolve_srv(name)
        except dns.exception.DNSException as e:
            logger.warning("SRV lookup for %s failed: %s", query, e)
            records = None

        records = list(records or [])
        logger.info("lookup_records found: %s", ", ".join(str(r) for r in records))
        return records
