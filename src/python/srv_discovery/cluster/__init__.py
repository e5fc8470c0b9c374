from .cluster_nodes_provider import ClusterNodesProvider
from .srv_cluster_nodes_provider import SrvClusterNodesProvider

__all__ = [
    "ClusterNodesProvider",
    "SrvClusterNodesProvider",
]
