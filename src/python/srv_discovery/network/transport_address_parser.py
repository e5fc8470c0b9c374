"""Turns ``host:port`` strings into connectable transport addresses.

The membership layer owns the real transport; discovery only needs a way
to validate and resolve the addresses it emits. Implementations of
:class:`TransportAddressParser` can wrap any transport.
"""

from __future__ import annotations

import abc
import socket

from ..exceptions import AddressParseError
from ..models import TransportAddress


class TransportAddressParser(abc.ABC):
    """Interface for parsing ``host:port`` strings into transport addresses."""

    @abc.abstractmethod
    def addresses_from_string(self, address: str) -> list[TransportAddress]:
        """Parse *address* into one or more connectable addresses.

        Raises:
            AddressParseError: If the string is malformed or cannot be
                resolved.
        """
        ...


class SocketTransportAddressParser(TransportAddressParser):
    """Parses addresses with ``getaddrinfo`` for TCP streams.

    Each resolved IP appears once, in resolver order. Bracketed IPv6
    literals (``[::1]:9300``) are accepted.
    """

    def addresses_from_string(self, address: str) -> list[TransportAddress]:
        host, port = self._split_host_port(address)
        try:
            infos = socket.getaddrinfo(host, port, socket.AF_UNSPEC, socket.SOCK_STREAM)
        except (socket.gaierror, UnicodeError) as e:
            raise AddressParseError(address, str(e)) from e

        addresses: list[TransportAddress] = []
        seen: set[str] = set()
        for info in infos:
            ip = info[4][0]
            if ip in seen:
                continue
            seen.add(ip)
            addresses.append(TransportAddress(host=host, ip=ip, port=port))

        if not addresses:
            raise AddressParseError(address, "no addresses returned")
        return addresses

    @staticmethod
    def _split_host_port(address: str) -> tuple[str, int]:
        address = address.strip()
        if address.startswith("["):
            bracket_end = address.find("]")
            if bracket_end < 0 or not address[bracket_end + 1:].startswith(":"):
                raise AddressParseError(address, "expected '[host]:port'")
            host = address[1:bracket_end]
            port_str = address[bracket_end + 2:]
        else:
            host, sep, port_str = address.rpartition(":")
            if not sep:
                raise AddressParseError(address, "missing port")

        if not host:
            raise AddressParseError(address, "missing host")
        try:
            port = int(port_str)
        except ValueError:
            raise AddressParseError(address, f"port '{port_str}' is not an integer") from None
        if not 0 < port <= 65535:
            raise AddressParseError(address, f"port {port} out of range")
        return host, port
