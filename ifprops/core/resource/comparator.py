"""
Comparador: ¿el estado real ya satisface el deseado?

Casi siempre hay más propiedades (y protocolos) en el sistema que en el
recurso. Solo se comprueban las declaradas: deseado ⊆ real, no igualdad.
"""

from typing import Any, Callable, List, Mapping, Optional

from ifprops.core.resource.values import to_variant, values_equal
from ifprops.core.runtime.state import StateDiff


PropertyMatcher = Callable[[Any, Any], bool]


def property_matches(observed_value: Any, desired_value: Any) -> bool:
    """Compara un valor real con el deseado; ausente (None) nunca coincide."""
    if observed_value is None:
        return False
    return values_equal(to_variant(observed_value), to_variant(desired_value))


def in_sync(
    desired: Mapping[str, Mapping[str, Any]],
    observed: Mapping[str, Mapping[str, Any]],
    matches: PropertyMatcher = property_matches,
) -> bool:
    """
    True si cada protocolo/propiedad deseado existe en observed y coincide.

    Recorre en orden de inserción y corta en el primer fallo.
    """
    for proto, props in desired.items():
        if proto not in observed:
            return False
        observed_props = observed[proto] or {}
        for key, value in props.items():
            # Parar en la primera propiedad desincronizada
            if not matches(observed_props.get(key), value):
                return False
    return True


def diff_properties(
    resource_id: str,
    desired: Mapping[str, Mapping[str, Any]],
    observed: Mapping[str, Mapping[str, Any]],
    matches: PropertyMatcher = property_matches,
) -> List[StateDiff]:
    """
    Lista todas las diferencias (sin cortar en la primera), para reportes de drift.
    field = "<protocolo>.<propiedad>"; actual = None si falta.
    """
    diffs: List[StateDiff] = []
    for proto, props in desired.items():
        observed_props: Optional[Mapping[str, Any]] = observed.get(proto)
        for key, value in props.items():
            field = f"{proto}.{key}"
            if observed_props is None:
                diffs.append(StateDiff(resource_id, field, value, None, "error"))
                continue
            actual = observed_props.get(key)
            if not matches(actual, value):
                diffs.append(StateDiff(resource_id, field, value, actual, "warning"))
    return diffs
