"""
Provider en memoria.

Se usa en tests y simulaciones locales. Se comporta como una base de datos
de estado keyed por interfaz → protocolo → propiedad.
"""

import copy
from typing import Dict, List, Optional, Set, Tuple

from ifprops.core.errors import ProviderError
from ifprops.core.infra.base import BaseProvider
from ifprops.core.runtime.state import ProtocolPropertyMap


class InMemoryProvider(BaseProvider):
    """
    state
      interfaz → protocolo → propiedad → valor.

    fail_on
      Interfaces cuyo apply falla (simula rechazo del sistema).

    applied / temporary_changes
      Registro de aplicaciones para inspección en tests.
    """

    name = "memory"

    def __init__(
        self,
        state: Optional[Dict[str, ProtocolPropertyMap]] = None,
        fail_on: Optional[Set[str]] = None,
    ) -> None:
        self.state: Dict[str, ProtocolPropertyMap] = copy.deepcopy(state or {})
        self.fail_on: Set[str] = set(fail_on or ())
        self.applied: List[Tuple[str, ProtocolPropertyMap, Optional[bool]]] = []
        self.temporary_changes: Dict[str, ProtocolPropertyMap] = {}

    def fetch_observed(self, identity: str) -> ProtocolPropertyMap:
        return copy.deepcopy(self.state.get(identity, {}))

    def apply_desired(
        self,
        identity: str,
        properties: ProtocolPropertyMap,
        temporary: Optional[bool] = None,
    ) -> None:
        if identity in self.fail_on:
            raise ProviderError(f"No se pudieron aplicar propiedades en {identity}")

        iface = self.state.setdefault(identity, {})
        for proto, props in properties.items():
            iface.setdefault(proto, {}).update(props)
            if temporary:
                self.temporary_changes.setdefault(identity, {}).setdefault(proto, {}).update(props)
        self.applied.append((identity, copy.deepcopy(properties), temporary))
