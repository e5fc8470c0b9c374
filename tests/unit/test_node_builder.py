"""Tests for host name stripping, local-record filtering and node translation."""

import logging

import pytest

from srv_discovery.models import TransportAddress
from srv_discovery.nodes.hostnames import strip_hostname
from srv_discovery.nodes.node_builder import NODE_ID_PREFIX, build_nodes, filter_out_local_records


@pytest.mark.parametrize(
    "target,postfix,expected",
    [
        ("node1.service.consul.", ".service.consul", "node1"),
        ("host1.example.com.", "", "host1.example.com"),
        ("host1.example.com", "", "host1.example.com"),
        ("host1.example.com..", "", "host1.example.com."),
        ("a.consul.b.consul.", ".consul", "a.b.consul"),
        ("node1.other.", ".service.consul", "node1.other"),
    ],
)
def test_strip_hostname(target, postfix, expected):
    assert strip_hostname(target, postfix) == expected


def test_filter_drops_local_records(srv_record, host_resolver, caplog):
    records = [
        srv_record("self.example.com."),
        srv_record("peer1.example.com."),
        srv_record("peer2.example.com."),
    ]
    resolve = host_resolver(
        {
            "self.example.com": "10.0.0.5",
            "peer1.example.com": "10.0.0.6",
            "peer2.example.com": "10.0.0.7",
        }
    )

    with caplog.at_level(logging.INFO, logger="srv_discovery.nodes.node_builder"):
        remote = filter_out_local_records(
            records,
            host_resolver=resolve,
            interface_addresses=lambda: {"127.0.0.1", "10.0.0.5"},
        )
    assert [r.target for r in remote] == ["peer1.example.com.", "peer2.example.com."]
    assert "2 of 3 records are remote candidates" in caplog.text


def test_filter_drops_unresolvable_records(srv_record, host_resolver, caplog):
    records = [srv_record("ghost.example.com."), srv_record("peer1.example.com.")]
    resolve = host_resolver({"peer1.example.com": "10.0.0.6"})

    with caplog.at_level(logging.ERROR):
        remote = filter_out_local_records(records, host_resolver=resolve, interface_addresses=set)
    assert [r.target for r in remote] == ["peer1.example.com."]
    assert "ghost.example.com" in caplog.text


def test_filter_drops_records_when_resolver_raises_foreign_errors(srv_record, caplog):
    def resolve(hostname):
        if hostname == "down.example.com":
            raise OSError("resolver down")
        if hostname == "bad.example.com":
            raise ValueError("bad name")
        return "10.0.0.6"

    records = [srv_record("down.example.com."), srv_record("bad.example.com."), srv_record("peer1.example.com.")]
    with caplog.at_level(logging.ERROR):
        remote = filter_out_local_records(records, host_resolver=resolve, interface_addresses=set)

    assert [r.target for r in remote] == ["peer1.example.com."]
    assert "resolver down" in caplog.text
    assert "bad name" in caplog.text


def test_filter_resolves_stripped_names(srv_record, host_resolver):
    resolve = host_resolver({"node1": "10.0.0.8"})
    remote = filter_out_local_records(
        [srv_record("node1.service.consul.")],
        consul_postfix=".service.consul",
        host_resolver=resolve,
        interface_addresses=set,
    )
    assert len(remote) == 1
    assert resolve.calls == ["node1"]


def test_filter_enumerates_interfaces_once(srv_record, host_resolver):
    calls = []

    def interfaces():
        calls.append(1)
        return {"127.0.0.1"}

    resolve = host_resolver({"a": "10.0.0.1", "b": "10.0.0.2"})
    filter_out_local_records([srv_record("a."), srv_record("b.")], host_resolver=resolve, interface_addresses=interfaces)
    assert calls == [1]


def test_build_nodes_end_to_end_shape(srv_record, fake_parser):
    parser = fake_parser({"host1.example.com": "10.0.0.7"})
    nodes = build_nodes([srv_record("host1.example.com.", 9300)], address_parser=parser, version="1.2.3")

    assert len(nodes) == 1
    node = nodes[0]
    assert node.node_id == "#srv-host1.example.com:9300"
    assert node.node_id.startswith(NODE_ID_PREFIX)
    assert node.address == TransportAddress(host="host1.example.com", ip="10.0.0.7", port=9300)
    assert node.version == "1.2.3"
    assert node.host_port == "host1.example.com:9300"
    assert parser.calls == ["host1.example.com:9300"]


def test_build_nodes_strips_postfix_like_filter(srv_record, fake_parser, host_resolver):
    records = [srv_record("node1.service.consul.", 9300)]
    resolve = host_resolver({"node1": "10.0.0.8"})
    parser = fake_parser({"node1": "10.0.0.8"})

    remote = filter_out_local_records(records, ".service.consul", host_resolver=resolve, interface_addresses=set)
    nodes = build_nodes(remote, parser, "1.0.0", consul_postfix=".service.consul")

    assert resolve.calls == ["node1"]
    assert parser.calls == ["node1:9300"]
    assert nodes[0].node_id == "#srv-node1:9300"


def test_build_nodes_drops_unparseable_and_keeps_order(srv_record, fake_parser):
    parser = fake_parser({"a.example.com": "10.0.0.1", "c.example.com": "10.0.0.3"})
    records = [
        srv_record("a.example.com.", 1),
        srv_record("b.example.com.", 2),
        srv_record("c.example.com.", 3),
    ]
    nodes = build_nodes(records, parser, "1.0.0")
    assert [n.node_id for n in nodes] == ["#srv-a.example.com:1", "#srv-c.example.com:3"]


def test_build_nodes_takes_first_address(srv_record):
    class MultiParser:
        def addresses_from_string(self, address):
            return [
                TransportAddress(host="multi", ip="10.0.0.1", port=9300),
                TransportAddress(host="multi", ip="10.0.0.2", port=9300),
            ]

    nodes = build_nodes([srv_record("multi.", 9300)], MultiParser(), "1.0.0")
    assert nodes[0].address.ip == "10.0.0.1"


def test_build_nodes_skips_empty_parse_result(srv_record):
    class EmptyParser:
        def addresses_from_string(self, address):
            return []

    assert build_nodes([srv_record("x.", 1)], EmptyParser(), "1.0.0") == []


def test_build_nodes_drops_records_when_parser_raises_foreign_errors(srv_record, caplog):
    class PickyParser:
        def addresses_from_string(self, address):
            if address.startswith("rejected."):
                raise ValueError(f"transport rejected {address}")
            return [TransportAddress(host="ok", ip="10.0.0.9", port=9300)]

    records = [srv_record("rejected.example.com.", 9300), srv_record("ok.", 9300)]
    with caplog.at_level(logging.WARNING):
        nodes = build_nodes(records, PickyParser(), "1.0.0")

    assert [n.node_id for n in nodes] == ["#srv-ok:9300"]
    assert "transport rejected rejected.example.com:9300" in caplog.text
