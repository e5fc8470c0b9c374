"""SRV resolver backed by the system DNS configuration."""

from __future__ import annotations

import dns.name
import dns.rdatatype
import dns.resolver

from ..models import SrvRecord
from .srv_resolver import SrvResolver, records_from_answer


class SystemSrvResolver(SrvResolver):
    """Uses dnspython's default resolver (``/etc/resolv.conf`` or the OS registry)."""

    def resolve_srv(self, name: dns.name.Name) -> list[SrvRecord]:
        try:
            answer = dns.resolver.resolve(
                name,
                dns.rdatatype.SRV,
                tcp=self.use_tcp,
                raise_on_no_answer=False,
            )
        except dns.resolver.NXDOMAIN:
            return []
        return records_from_answer(answer)

    def __repr__(self) -> str:
        return "SystemSrvResolver()"
