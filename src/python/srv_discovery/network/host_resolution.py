"""Forward host name resolution and local interface enumeration."""

from __future__ import annotations

import logging
import socket

import psutil

from ..exceptions import HostResolutionError

logger = logging.getLogger(__name__)

_INET_FAMILIES = (socket.AF_INET, socket.AF_INET6)


def resolve_host(hostname: str) -> str:
    """Resolve *hostname* to the textual form of its first IP address.

    Raises:
        HostResolutionError: If the name cannot be resolved.
    """
    try:
        infos = socket.getaddrinfo(hostname, None, socket.AF_UNSPEC, socket.SOCK_STREAM)
    except (socket.gaierror, UnicodeError) as e:
        raise HostResolutionError(hostname, str(e)) from e
    if not infos:
        raise HostResolutionError(hostname, "no addresses returned")
    return _strip_scope(infos[0][4][0])


def local_interface_addresses() -> set[str]:
    """Return every IPv4/IPv6 address bound to a local network interface.

    Enumerated fresh on each call. If the interfaces cannot be listed the
    error is logged and an empty set is returned.
    """
    try:
        interfaces = psutil.net_if_addrs()
    except OSError as e:
        logger.error("Unable to enumerate network interfaces: %s", e)
        return set()

    addresses: set[str] = set()
    for name, snics in interfaces.items():
        for snic in snics:
            if snic.family not in _INET_FAMILIES:
                continue
            address = _strip_scope(snic.address)
            logger.debug("Local interface address: %s (%s)", address, name)
            addresses.add(address)
    return addresses


def _strip_scope(address: str) -> str:
    # IPv6 link-local addresses may carry a "%iface" zone suffix
    return address.split("%", 1)[0]
