import pytest

from ifprops.core.errors import InvalidFormat, MissingProtocol
from ifprops.core.resource.normalizer import is_legacy_syntax, normalize_properties


def test_legacy_syntax_moves_protocol_from_name():
    name, props = normalize_properties("net0/ipv4", {"mtu": "1776"})

    assert name == "net0"
    assert props == {"ipv4": {"mtu": "1776"}}


def test_canonical_syntax_passes_through():
    value = {"ipv4": {"mtu": "1776"}}
    name, props = normalize_properties("net0", value)

    assert name == "net0"
    assert props is value


def test_normalization_is_idempotent():
    for identity, value in [("net0/ipv4", {"mtu": "1776"}), ("net0", {"ipv6": {"mtu": "2048"}})]:
        once = normalize_properties(identity, value)
        twice = normalize_properties(*once)
        assert twice == once


def test_legacy_syntax_does_not_mutate_input():
    value = {"mtu": "1776"}
    normalize_properties("net0/ipv6", value)
    assert value == {"mtu": "1776"}


@pytest.mark.parametrize("identity", ["net0", "net0/"])
def test_legacy_syntax_without_protocol_fails(identity):
    with pytest.raises(MissingProtocol):
        normalize_properties(identity, {"mtu": "1776"})


def test_legacy_syntax_with_unknown_protocol_fails():
    with pytest.raises(InvalidFormat):
        normalize_properties("net0/ipx", {"mtu": "1776"})


def test_legacy_detection():
    assert is_legacy_syntax({"mtu": "1500"})
    assert not is_legacy_syntax({"ip": {"standby": "on"}})
