"""
Reconciliación: una pasada por recurso.

Lógica pura: entrada = recurso + provider (contrato); salida = resultado.
  1) leer estado real (provider.fetch_observed)
  2) comparar (in_sync); si coincide, nada más
  3) si no coincide y no es dry-run, aplicar (provider.apply_desired)

Un recurso desincronizado no es un error: es la señal para aplicar.
Los errores del provider se propagan; no hay reintentos aquí.
"""

from dataclasses import dataclass, field
from typing import List

from ifprops.core.infra.contracts import ProviderContract
from ifprops.core.resource.catalog import Catalog
from ifprops.core.resource.models import InterfacePropertiesResource
from ifprops.core.runtime.state import StateDiff


@dataclass
class ReconcileResult:
    """Resultado de reconciliar un recurso."""
    name: str
    title: str
    in_sync: bool
    applied: bool = False
    temporary: bool = False
    diffs: List[StateDiff] = field(default_factory=list)
    requires: List[str] = field(default_factory=list)


def reconcile(
    resource: InterfacePropertiesResource,
    provider: ProviderContract,
    dry_run: bool = False,
) -> ReconcileResult:
    observed = provider.fetch_observed(resource.name)
    result = ReconcileResult(
        name=resource.name,
        title=resource.title or resource.name,
        in_sync=resource.in_sync(observed),
        temporary=bool(resource.is_temporary),
    )
    if result.in_sync:
        return result

    result.diffs = resource.diff(observed)
    if not dry_run:
        provider.apply_desired(resource.name, resource.desired_state(), resource.is_temporary)
        result.applied = True
    return result


def reconcile_catalog(
    catalog: Catalog,
    provider: ProviderContract,
    dry_run: bool = False,
) -> List[ReconcileResult]:
    """Reconcilia todos los recursos en orden de declaración."""
    results: List[ReconcileResult] = []
    for resource in catalog:
        result = reconcile(resource, provider, dry_run=dry_run)
        result.requires = catalog.requires(resource)
        results.append(result)
    return results


def plan_from_results(results: List[ReconcileResult]) -> List[str]:
    """
    Convierte resultados en acciones legibles (para mostrar en CLI).
    No ejecuta nada.
    """
    actions: List[str] = []
    for r in results:
        if r.in_sync:
            continue
        suffix = " (temporal)" if r.temporary else ""
        for d in r.diffs:
            if d.actual is None:
                actions.append(f"Crear {r.name}.{d.field} = {d.desired}{suffix}")
            else:
                actions.append(f"Actualizar {r.name}.{d.field}: {d.actual} → {d.desired}{suffix}")
    return actions
