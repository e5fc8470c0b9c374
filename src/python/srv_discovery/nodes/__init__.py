from .hostnames import strip_hostname
from .node_builder import NODE_ID_PREFIX, build_nodes, filter_out_local_records

__all__ = [
    "NODE_ID_PREFIX",
    "build_nodes",
    "filter_out_local_records",
    "strip_hostname",
]
