"""Shared fakes for the SRV discovery unit tests."""

from __future__ import annotations

import pytest

from srv_discovery.exceptions import AddressParseError, HostResolutionError
from srv_discovery.models import SrvRecord, TransportAddress
from srv_discovery.network.transport_address_parser import TransportAddressParser
from srv_discovery.resolvers.srv_resolver import SrvResolver


class FakeSrvResolver(SrvResolver):
    def __init__(self, records=None, error=None, name="fake"):
        self.records = list(records or [])
        self.error = error
        self.name = name
        self.queries: list[str] = []

    def resolve_srv(self, name):
        self.queries.append(name.to_text())
        if self.error is not None:
            raise self.error
        return list(self.records)

    def __repr__(self):
        return f"FakeSrvResolver({self.name})"


class FakeAddressParser(TransportAddressParser):
    def __init__(self, ips):
        self.ips = dict(ips)
        self.calls: list[str] = []

    def addresses_from_string(self, address):
        self.calls.append(address)
        host, _, port = address.rpartition(":")
        if host not in self.ips:
            raise AddressParseError(address, "unknown host")
        return [TransportAddress(host=host, ip=self.ips[host], port=int(port))]


def make_host_resolver(mapping):
    calls: list[str] = []

    def resolve(hostname):
        calls.append(hostname)
        if hostname not in mapping:
            raise HostResolutionError(hostname, "unknown host")
        return mapping[hostname]

    resolve.calls = calls
    return resolve


@pytest.fixture
def fake_resolver():
    return FakeSrvResolver


@pytest.fixture
def fake_parser():
    return FakeAddressParser


@pytest.fixture
def host_resolver():
    return make_host_resolver


@pytest.fixture
def srv_record():
    def _make(target, port=9300, priority=0, weight=0):
        return SrvRecord(target=target, port=port, priority=priority, weight=weight)

    return _make
