"""Abstract base class for cluster node discovery.

A membership layer polls an implementation of this interface for the
peers it should currently try to contact. The answer may change between
calls as nodes join or leave.
"""

from __future__ import annotations

import abc

from ..models import DiscoveryNode


class ClusterNodesProvider(abc.ABC):
    """Interface that supplies the current set of candidate cluster nodes.

    Implementations might query DNS SRV records, a service registry, or
    any other discovery mechanism.
    """

    @abc.abstractmethod
    def discover_nodes(self) -> list[DiscoveryNode]:
        """Return the candidate nodes for this discovery cycle.

        Called periodically by the membership layer. It **must** never
        return ``None`` and should not raise for transient failures;
        a failed cycle returns an empty list.
        """
        ...

    def get_nodes(self) -> list[str]:
        """Return the ``"host:port"`` strings of :meth:`discover_nodes`."""
        return [node.host_port for node in self.discover_nodes()]
