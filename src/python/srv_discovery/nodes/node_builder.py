"""Turns raw SRV records into discovery nodes.

Two stages run in order:

1. :func:`filter_out_local_records` drops records whose target resolves to
   an address bound to this machine, and records whose target cannot be
   resolved at all.
2. :func:`build_nodes` parses the surviving ``host:port`` strings through
   the transport layer and wraps them in :class:`DiscoveryNode`.

Both stages normalize host names with :func:`strip_hostname` so they always
agree on the name being used.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from ..exceptions import AddressParseError, HostResolutionError
from ..models import DiscoveryNode, SrvRecord
from ..network.host_resolution import local_interface_addresses, resolve_host
from ..network.transport_address_parser import TransportAddressParser
from .hostnames import strip_hostname

logger = logging.getLogger(__name__)

NODE_ID_PREFIX = "#srv-"


def filter_out_local_records(
    records: Sequence[SrvRecord],
    consul_postfix: str = "",
    host_resolver: Callable[[str], str] = resolve_host,
    interface_addresses: Callable[[], Iterable[str]] = local_interface_addresses,
) -> list[SrvRecord]:
    """Return the records that point at a remote host, in input order."""
    logger.info(
        "Trying to filter out localhost records from: %s",
        ", ".join(str(r) for r in records),
    )
    local_addresses = set(interface_addresses())
    remote: list[SrvRecord] = []

    for record in records:
        hostname = strip_hostname(record.target, consul_postfix)
        try:
            address = host_resolver(hostname)
        except (HostResolutionError, OSError, ValueError) as e:
            logger.error("Could not resolve %s: %s", hostname, e)
            continue

        logger.info("Resolved %s to %s", hostname, address)
        if address in local_addresses:
            logger.info(
                "Filtered out interface address %s because it was a local interface.",
                address,
            )
            continue
        remote.append(record)

    logger.info("%d of %d records are remote candidates", len(remote), len(records))
    return remote


def build_nodes(
    records: Sequence[SrvRecord],
    address_parser: TransportAddressParser,
    version: str,
    consul_postfix: str = "",
) -> list[DiscoveryNode]:
    """Translate records into nodes, dropping any the transport cannot parse."""
    nodes: list[DiscoveryNode] = []
    for record in records:
        hostname = strip_hostname(record.target, consul_postfix)
        if consul_postfix:
            logger.debug("Removed consul postfix from '%s'", record.target)
        address = f"{hostname}:{record.port}"

        try:
            transport_addresses = address_parser.addresses_from_string(address)
        except AddressParseError as e:
            logger.info("failed to add %s: %s", address, e)
            continue
        except Exception as e:
            logger.warning("failed to add %s: %s", address, e, exc_info=True)
            continue
        if not transport_addresses:
            logger.info("failed to add %s: no transport address", address)
            continue

        logger.info("adding %s, transport_address %s", address, transport_addresses[0])
        nodes.append(
            DiscoveryNode(
                node_id=NODE_ID_PREFIX + address,
                address=transport_addresses[0],
                version=version,
            )
        )
    return nodes
