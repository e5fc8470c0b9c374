"""DNS SRV cluster nodes provider.

Queries the SRV records of ``discovery.srv.query`` on every
``discover_nodes()`` call, drops records that point back at this machine,
and returns the rest as :class:`DiscoveryNode` candidates. Nothing is
cached between calls, so DNS changes show up on the next cycle.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from .. import __version__
from ..config import SrvDiscoveryConfig
from ..exceptions import QueryParseError
from ..models import DiscoveryNode
from ..network.host_resolution import local_interface_addresses, resolve_host
from ..network.transport_address_parser import TransportAddressParser
from ..nodes.node_builder import build_nodes, filter_out_local_records
from ..resolvers.resolver_builder import build_resolver
from ..resolvers.srv_query_executor import SrvQueryExecutor
from ..resolvers.srv_resolver import SrvResolver
from .cluster_nodes_provider import ClusterNodesProvider


class SrvClusterNodesProvider(ClusterNodesProvider):
    """Discovers cluster nodes from DNS SRV records.

    Args:
        config: SRV discovery settings.
        address_parser: Transport layer hook that turns ``host:port``
            into connectable addresses.
        version: Version tag attached to every emitted node.
        system_resolver: Resolver used when no name servers are
            configured. Defaults to the system DNS configuration.
        host_resolver: Forward lookup for name servers and SRV targets.
        interface_addresses: Enumerates local interface addresses.
        logger: Logger for discovery messages.

    Raises:
        ResolverConfigurationError: If name servers are configured but
            none of them is usable.
    """

    def __init__(
        self,
        config: SrvDiscoveryConfig,
        address_parser: TransportAddressParser,
        version: str = __version__,
        system_resolver: Optional[SrvResolver] = None,
        host_resolver: Callable[[str], str] = resolve_host,
        interface_addresses: Callable[[], Iterable[str]] = local_interface_addresses,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._logger = logger or logging.getLogger(self.__class__.__name__)
        self._config = config
        self._address_parser = address_parser
        self._version = version
        self._host_resolver = host_resolver
        self._interface_addresses = interface_addresses

        self._resolver = build_resolver(
            config.servers,
            config.protocol,
            host_resolver=host_resolver,
        )
        self._executor = SrvQueryExecutor(self._resolver, system_resolver=system_resolver)

    @property
    def config(self) -> SrvDiscoveryConfig:
        return self._config

    @property
    def resolver(self) -> Optional[SrvResolver]:
        """The composite resolver, or ``None`` when the system resolver is used."""
        return self._resolver

    def discover_nodes(self) -> list[DiscoveryNode]:
        self._logger.info("Entering discover_nodes")
        nodes: list[DiscoveryNode] = []

        try:
            records = self._executor.lookup(self._config.query)
        except QueryParseError as e:
            self._logger.error("DNS lookup exception: %s", e)
            return nodes

        self._logger.info("Found the following records: %s", ", ".join(str(r) for r in records))
        remote_records = filter_out_local_records(
            records,
            consul_postfix=self._config.consul_postfix,
            host_resolver=self._host_resolver,
            interface_addresses=self._interface_addresses,
        )

        self._logger.info("Building dynamic discovery nodes...")
        if not remote_records:
            self._logger.warning("No nodes found")
        else:
            nodes = build_nodes(
                remote_records,
                address_parser=self._address_parser,
                version=self._version,
                consul_postfix=self._config.consul_postfix,
            )

        self._logger.info("Using dynamic discovery nodes %s", [str(n) for n in nodes])
        return nodes
