from ifprops.core.resource.dependencies import CatalogResource, depends_on


def test_depends_on_matching_ip_interface():
    candidates = [
        CatalogResource(type="ip_interface", name="net0"),
        CatalogResource(type="ip_interface", name="net1"),
    ]
    assert depends_on("net0/ipv4", candidates) == ["net0"]


def test_no_match_is_empty():
    assert depends_on("net0/ipv4", [CatalogResource(type="ip_interface", name="net1")]) == []


def test_other_resource_types_are_ignored():
    candidates = [
        CatalogResource(type="vnic", name="net0"),
        CatalogResource(type="interface_properties", name="net0"),
    ]
    assert depends_on("net0", candidates) == []
