"""
Modelo del recurso interface_properties.
Usa Pydantic para validación y normalización al construir.

  name: net0
  properties:
    ipv4: {mtu: "1776"}
    ipv6: {mtu: "2048"}

Sintaxis antigua (el protocolo viaja en el nombre):

  name: net0/ipv4
  properties: {mtu: "1776"}

Para el protocolo 'ip' solo se gestiona la propiedad 'standby'. Ver ipadm(8).
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from ifprops.core.errors import InvalidProperty, UnsupportedEnsureValue
from ifprops.core.resource.comparator import PropertyMatcher, diff_properties, in_sync, property_matches
from ifprops.core.resource.dependencies import CatalogResource, depends_on
from ifprops.core.resource.identity import ProtocolName, validate_identity
from ifprops.core.resource.normalizer import normalize_properties
from ifprops.core.resource.values import coerce_raw
from ifprops.core.runtime.state import ProtocolPropertyMap, StateDiff


RESOURCE_TYPE = "interface_properties"

PropertyValue = Union[str, List[str]]

IP_MANAGED_PROPERTIES = frozenset({"standby"})


class EnsureState(str, Enum):
    """Solo 'present' es válido: se sincronizan propiedades, no se eliminan"""
    PRESENT = "present"
    ABSENT = "absent"


class TemporaryFlag(str, Enum):
    """Cambios temporales: duran hasta el próximo reinicio"""
    TRUE = "true"
    FALSE = "false"


def _enum_text(value: Any) -> str:
    return str(getattr(value, "value", value)).strip().lower()


class InterfacePropertiesResource(BaseModel):
    """Propiedades de protocolo de una interfaz (forma canónica)"""
    name: str = Field(..., description="Nombre de la interfaz (ej: net0); sin sufijo tras normalizar")
    title: Optional[str] = Field(None, description="Nombre tal como se declaró (ej: net0/ipv4)")
    temporary: Optional[TemporaryFlag] = Field(None, description="true | false; por defecto decide el provider")
    ensure: EnsureState = Field(EnsureState.PRESENT, description="present (absent no está soportado)")
    properties: Dict[ProtocolName, Dict[str, PropertyValue]] = Field(
        default_factory=dict,
        description="protocolo → {propiedad: valor}",
    )

    class Config:
        use_enum_values = True

    @model_validator(mode="before")
    @classmethod
    def normalize_declaration(cls, data: Any) -> Any:
        """
        ensure=absent falla antes que cualquier otra regla.
        Después: valida el nombre y convierte la sintaxis antigua a la canónica.
        """
        if not isinstance(data, dict):
            return data
        if _enum_text(data.get("ensure", "present")) == EnsureState.ABSENT.value:
            raise UnsupportedEnsureValue(
                f"'{data.get('name')}': las propiedades de interfaz no se pueden eliminar "
                "(solo se soporta ensure: present)"
            )
        name = data.get("name")
        if not isinstance(name, str):
            return data
        validate_identity(name)
        data = {**data, "title": data.get("title") or name}
        props = data.get("properties")
        if isinstance(props, dict):
            data["name"], data["properties"] = normalize_properties(name, props)
        return data

    @field_validator("name")
    @classmethod
    def check_name(cls, v: str) -> str:
        validate_identity(v)
        return v

    @field_validator("temporary", mode="before")
    @classmethod
    def coerce_temporary(cls, v: Any) -> Any:
        if v is None:
            return v
        return _enum_text(coerce_raw(v))

    @field_validator("properties", mode="before")
    @classmethod
    def coerce_values(cls, v: Any) -> Any:
        """YAML entrega mtu: 1776 como int; ipadm trabaja con cadenas."""
        if not isinstance(v, dict):
            return v
        coerced: Dict[Any, Any] = {}
        for proto, props in v.items():
            if isinstance(props, dict):
                coerced[proto] = {str(k): coerce_raw(val) for k, val in props.items()}
            else:
                coerced[proto] = props
        return coerced

    @model_validator(mode="after")
    def check_ip_properties(self):
        extra = sorted(set(self.properties.get("ip", {})) - IP_MANAGED_PROPERTIES)
        if extra:
            raise InvalidProperty(
                f"'{self.title or self.name}': para el protocolo 'ip' solo se gestiona "
                f"'standby' (recibido: {', '.join(extra)})"
            )
        return self

    @property
    def is_temporary(self) -> Optional[bool]:
        if self.temporary is None:
            return None
        return _enum_text(self.temporary) == TemporaryFlag.TRUE.value

    def protocols(self) -> List[str]:
        return list(self.properties.keys())

    def desired_state(self) -> ProtocolPropertyMap:
        return {proto: dict(props) for proto, props in self.properties.items()}

    def in_sync(self, observed: ProtocolPropertyMap, matches: PropertyMatcher = property_matches) -> bool:
        return in_sync(self.properties, observed, matches)

    def diff(self, observed: ProtocolPropertyMap) -> List[StateDiff]:
        return diff_properties(self.name, self.properties, observed)

    def requires(self, candidates: Iterable[CatalogResource]) -> List[str]:
        return depends_on(self.name, candidates)
