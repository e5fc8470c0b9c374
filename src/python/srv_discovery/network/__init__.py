from .host_resolution import local_interface_addresses, resolve_host
from .transport_address_parser import SocketTransportAddressParser, TransportAddressParser

__all__ = [
    "SocketTransportAddressParser",
    "TransportAddressParser",
    "local_interface_addresses",
    "resolve_host",
]
