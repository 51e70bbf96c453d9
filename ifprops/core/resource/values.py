"""
Valores de propiedad: escalar o lista.

Los valores llegan desde YAML (int, bool, str, list) o desde el provider.
Se reducen a una variante cerrada con regla de igualdad explícita:

  ScalarValue == ScalarValue   → igualdad de cadenas
  ListValue   == ListValue     → igualdad de conjuntos (el orden no importa)
  mezcla                       → el escalar se separa por ',' y se compara como lista
"""

from dataclasses import dataclass
from typing import Any, Tuple, Union


@dataclass(frozen=True)
class ScalarValue:
    value: str


@dataclass(frozen=True)
class ListValue:
    items: Tuple[str, ...]

    def as_set(self) -> frozenset:
        return frozenset(self.items)


PropertyVariant = Union[ScalarValue, ListValue]


def to_text(raw: Any) -> str:
    """Convierte un escalar YAML a texto (booleanos en minúsculas, como ipadm)."""
    if isinstance(raw, bool):
        return "true" if raw else "false"
    return str(raw)


def coerce_raw(raw: Any) -> Union[str, list]:
    """Forma serializable: str o list[str]."""
    if isinstance(raw, (list, tuple, set, frozenset)):
        return [to_text(item) for item in raw]
    return to_text(raw)


def to_variant(raw: Any) -> PropertyVariant:
    if isinstance(raw, (ScalarValue, ListValue)):
        return raw
    if isinstance(raw, (list, tuple, set, frozenset)):
        return ListValue(tuple(to_text(item) for item in raw))
    return ScalarValue(to_text(raw))


def _as_list(variant: PropertyVariant) -> ListValue:
    if isinstance(variant, ListValue):
        return variant
    items = tuple(part.strip() for part in variant.value.split(",") if part.strip())
    return ListValue(items)


def values_equal(left: PropertyVariant, right: PropertyVariant) -> bool:
    if isinstance(left, ScalarValue) and isinstance(right, ScalarValue):
        return left.value == right.value
    return _as_list(left).as_set() == _as_list(right).as_set()
