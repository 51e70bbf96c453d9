import pytest

from ifprops.core.errors import ProviderError
from ifprops.core.reconcile import plan_from_results, reconcile, reconcile_catalog
from ifprops.core.resource.models import InterfacePropertiesResource
from ifprops.declarative.loader import catalog_from_dict
from ifprops.providers.memory import InMemoryProvider


def _make_resource(**kwargs) -> InterfacePropertiesResource:
    data = {"name": "net0/ipv4", "properties": {"mtu": "1776"}}
    data.update(kwargs)
    return InterfacePropertiesResource(**data)


def test_in_sync_resource_is_not_applied():
    provider = InMemoryProvider(state={"net0": {"ipv4": {"mtu": "1776", "ttl": "255"}}})

    result = reconcile(_make_resource(), provider)

    assert result.in_sync
    assert not result.applied
    assert provider.applied == []


def test_out_of_sync_resource_is_applied():
    provider = InMemoryProvider(state={"net0": {"ipv4": {"mtu": "1500", "ttl": "255"}}})

    result = reconcile(_make_resource(), provider)

    assert not result.in_sync
    assert result.applied
    assert [d.field for d in result.diffs] == ["ipv4.mtu"]
    assert provider.state["net0"]["ipv4"] == {"mtu": "1776", "ttl": "255"}
    assert reconcile(_make_resource(), provider).in_sync


def test_dry_run_does_not_apply():
    provider = InMemoryProvider(state={"net0": {"ipv4": {"mtu": "1500"}}})

    result = reconcile(_make_resource(), provider, dry_run=True)

    assert not result.in_sync
    assert not result.applied
    assert provider.state["net0"]["ipv4"]["mtu"] == "1500"


def test_temporary_flag_reaches_provider():
    provider = InMemoryProvider()

    result = reconcile(_make_resource(temporary=True), provider)

    assert result.temporary
    assert provider.applied == [("net0", {"ipv4": {"mtu": "1776"}}, True)]
    assert provider.temporary_changes == {"net0": {"ipv4": {"mtu": "1776"}}}


def test_provider_failure_propagates():
    provider = InMemoryProvider(fail_on={"net0"})
    with pytest.raises(ProviderError):
        reconcile(_make_resource(), provider)


def test_reconcile_catalog_attaches_requires_and_plan():
    catalog = catalog_from_dict(
        {
            "resources": [
                {"type": "ip_interface", "name": "net0"},
                {"type": "interface_properties", "name": "net0/ipv4", "properties": {"mtu": "1776"}},
                {"type": "interface_properties", "name": "net1", "properties": {"ipv6": {"mtu": "2048"}}},
            ]
        }
    )
    provider = InMemoryProvider(state={"net0": {"ipv4": {"mtu": "1500"}}, "net1": {"ipv6": {"mtu": "2048"}}})

    results = reconcile_catalog(catalog, provider, dry_run=True)

    assert [(r.name, r.in_sync, r.requires) for r in results] == [
        ("net0", False, ["net0"]),
        ("net1", True, []),
    ]
    assert plan_from_results(results) == ["Actualizar net0.ipv4.mtu: 1500 → 1776"]


def test_plan_reports_missing_properties_as_create():
    provider = InMemoryProvider()
    results = [reconcile(_make_resource(temporary="true"), provider, dry_run=True)]

    assert plan_from_results(results) == ["Crear net0.ipv4.mtu = 1776 (temporal)"]
