from .composite_resolver import CompositeSrvResolver
from .name_server_resolver import NameServerResolver
from .resolver_builder import build_resolver, is_tcp, parse_endpoint
from .srv_query_executor import SrvQueryExecutor, parse_query
from .srv_resolver import SrvResolver
from .system_resolver import SystemSrvResolver

__all__ = [
    "CompositeSrvResolver",
    "NameServerResolver",
    "SrvQueryExecutor",
    "SrvResolver",
    "SystemSrvResolver",
    "build_resolver",
    "is_tcp",
    "parse_endpoint",
    "parse_query",
]
