import pytest

from ifprops.core.errors import InvalidFormat, InvalidLength
from ifprops.core.resource.identity import split_identity, validate_identity


@pytest.mark.parametrize(
    "identity",
    ["net0", "ab1", "net0/ipv4", "net0/ipv6", "net0/ip", "e1000g0", "vnic_a12", "abcdefghijklmno1", "net0/"],
)
def test_valid_identities_pass(identity):
    validate_identity(identity)


def test_interface_name_longer_than_16_is_invalid_length():
    with pytest.raises(InvalidLength):
        validate_identity("abcdefghijklmnop1/ipv4")


def test_interface_name_shorter_than_3_is_invalid_length():
    with pytest.raises(InvalidLength):
        validate_identity("a1")


@pytest.mark.parametrize("identity", ["NET0", "net", "net0/ipv5", "net0/ipx", "net-0", "net0/ipv4/x", "", "net0\n", "net0/ipv4\n"])
def test_pattern_violations_are_invalid_format(identity):
    with pytest.raises(InvalidFormat):
        validate_identity(identity)


def test_format_is_reported_when_both_rules_fail():
    with pytest.raises(InvalidFormat):
        validate_identity("ab")


def test_split_identity():
    assert split_identity("net0/ipv4") == ("net0", "ipv4")
    assert split_identity("net0") == ("net0", "")
    assert split_identity("net0/") == ("net0", "")
