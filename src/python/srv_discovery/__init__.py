"""SRV Discovery Library: DNS SRV based cluster peer discovery.

Answers "which addresses should the membership layer try to contact?" by
querying DNS SRV records through one or more configured name servers,
dropping records that point back at this machine, and translating the
rest into connectable :class:`DiscoveryNode` candidates.

Quick Start::

    from srv_discovery import (
        SocketTransportAddressParser,
        SrvClusterNodesProvider,
        SrvDiscoveryConfig,
    )

    config = SrvDiscoveryConfig.from_settings({
        "discovery.srv.query": "_node._tcp.example.com",
        "discovery.srv.servers": ["10.0.0.2:8600", "10.0.0.3"],
        "discovery.srv.consulpostfix": ".service.consul",
    })
    provider = SrvClusterNodesProvider(config, SocketTransportAddressParser())

    for node in provider.discover_nodes():
        print(node.node_id, node.address)
"""

__version__ = "1.0.0"

from .cluster.cluster_nodes_provider import ClusterNodesProvider
from .cluster.srv_cluster_nodes_provider import SrvClusterNodesProvider
from .config import (
    DISCOVERY_SRV_CONSULPOSTFIX,
    DISCOVERY_SRV_PROTOCOL,
    DISCOVERY_SRV_QUERY,
    DISCOVERY_SRV_SERVERS,
    SrvDiscoveryConfig,
    load_config,
)
from .exceptions import (
    AddressParseError,
    HostResolutionError,
    QueryParseError,
    ResolverConfigurationError,
    SrvDiscoveryError,
)
from .models import DiscoveryNode, DnsProtocol, ResolverEndpoint, SrvRecord, TransportAddress
from .network.transport_address_parser import SocketTransportAddressParser, TransportAddressParser
from .nodes.hostnames import strip_hostname
from .resolvers.composite_resolver import CompositeSrvResolver
from .resolvers.resolver_builder import build_resolver
from .resolvers.srv_query_executor import SrvQueryExecutor
from .resolvers.srv_resolver import SrvResolver
from .wiring import SrvDiscoveryModule

__all__ = [
    "__version__",
    # Cluster
    "ClusterNodesProvider",
    "SrvClusterNodesProvider",
    "SrvDiscoveryModule",
    # Config
    "DISCOVERY_SRV_CONSULPOSTFIX",
    "DISCOVERY_SRV_PROTOCOL",
    "DISCOVERY_SRV_QUERY",
    "DISCOVERY_SRV_SERVERS",
    "SrvDiscoveryConfig",
    "load_config",
    # Resolvers
    "CompositeSrvResolver",
    "SrvQueryExecutor",
    "SrvResolver",
    "build_resolver",
    # Transport
    "SocketTransportAddressParser",
    "TransportAddressParser",
    "strip_hostname",
    # Models
    "DiscoveryNode",
    "DnsProtocol",
    "ResolverEndpoint",
    "SrvRecord",
    "TransportAddress",
    # Exceptions
    "AddressParseError",
    "HostResolutionError",
    "QueryParseError",
    "ResolverConfigurationError",
    "SrvDiscoveryError",
]
