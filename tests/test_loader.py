import pytest

from ifprops.core.errors import ConfigError, DuplicateResource, UnsupportedEnsureValue
from ifprops.declarative.loader import catalog_from_dict, load_manifest


MANIFEST = """
resources:
  - type: ip_interface
    name: net0
  - type: interface_properties
    name: net0/ipv4
    temporary: true
    properties:
      mtu: 1776
  - type: interface_properties
    name: net1
    properties:
      ipv6: {mtu: "2048"}
"""


def test_load_manifest_builds_catalog(tmp_path):
    path = tmp_path / "interfaces.yaml"
    path.write_text(MANIFEST, encoding="utf-8")

    catalog = load_manifest(path)

    assert catalog.names() == ["net0", "net1"]
    net0 = catalog.get("net0")
    assert net0 is not None
    assert net0.title == "net0/ipv4"
    assert net0.is_temporary is True
    assert catalog.requires(net0) == ["net0"]
    assert catalog.requires(catalog.get("net1")) == []


def test_missing_manifest_is_config_error(tmp_path):
    with pytest.raises(ConfigError):
        load_manifest(tmp_path / "missing.yaml")


def test_invalid_yaml_is_config_error(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("resources: [\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_manifest(path)


def test_duplicate_canonical_name_is_rejected():
    data = {
        "resources": [
            {"type": "interface_properties", "name": "net0/ipv4", "properties": {"mtu": "1500"}},
            {"type": "interface_properties", "name": "net0", "properties": {"ipv6": {"mtu": "1500"}}},
        ]
    }
    with pytest.raises(DuplicateResource):
        catalog_from_dict(data)


def test_entries_need_type_and_name():
    with pytest.raises(ConfigError):
        catalog_from_dict({"resources": [{"name": "net0"}]})
    with pytest.raises(ConfigError):
        catalog_from_dict({"resources": [{"type": "ip_interface"}]})
    with pytest.raises(ConfigError):
        catalog_from_dict({"resources": "net0"})


def test_structural_errors_are_wrapped_in_config_error():
    data = {"resources": [{"type": "interface_properties", "name": "net0", "properties": {"ipv4": "1500"}}]}
    with pytest.raises(ConfigError):
        catalog_from_dict(data)


def test_ensure_absent_propagates_unwrapped():
    data = {"resources": [{"type": "interface_properties", "name": "net0", "ensure": "absent"}]}
    with pytest.raises(UnsupportedEnsureValue):
        catalog_from_dict(data)
