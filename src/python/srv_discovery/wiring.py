"""Dependency injection bindings for SRV discovery.

Usage::

    injector = Injector([SrvDiscoveryModule(config)])
    provider = injector.get(ClusterNodesProvider)
"""

from __future__ import annotations

from injector import Binder, Module, provider, singleton

from . import __version__
from .cluster.cluster_nodes_provider import ClusterNodesProvider
from .cluster.srv_cluster_nodes_provider import SrvClusterNodesProvider
from .config import SrvDiscoveryConfig
from .network.transport_address_parser import SocketTransportAddressParser, TransportAddressParser


class SrvDiscoveryModule(Module):
    """Binds the config, the transport address parser and the SRV provider.

    The provider is a singleton so its resolver is built once and reused
    for every discovery cycle.
    """

    def __init__(self, config: SrvDiscoveryConfig, version: str = __version__) -> None:
        self._config = config
        self._version = version

    def configure(self, binder: Binder) -> None:
        binder.bind(SrvDiscoveryConfig, to=self._config)
        binder.bind(TransportAddressParser, to=SocketTransportAddressParser, scope=singleton)

    @singleton
    @provider
    def provide_cluster_nodes_provider(
        self,
        config: SrvDiscoveryConfig,
        address_parser: TransportAddressParser,
    ) -> ClusterNodesProvider:
        return SrvClusterNodesProvider(
            config=config,
            address_parser=address_parser,
            version=self._version,
        )
