"""
Provider de archivo: estado observado en YAML.

Formato esperado:
  interfaces:
    net0:
      ipv4: {mtu: "1500", forwarding: "off"}
      ipv6: {mtu: "1500"}

Los cambios persistentes se escriben al archivo. Los temporales solo viven
en memoria (overlay) mientras dure el proceso, igual que un cambio temporal
se pierde al reiniciar.
"""

import copy
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from rich.console import Console

from ifprops.core.errors import ProviderError
from ifprops.core.infra.base import BaseProvider
from ifprops.core.resource.values import coerce_raw
from ifprops.core.runtime.state import ProtocolPropertyMap


def _merge(target: Dict[str, ProtocolPropertyMap], identity: str, properties: ProtocolPropertyMap) -> None:
    iface = target.setdefault(identity, {})
    for proto, props in properties.items():
        iface.setdefault(proto, {}).update(props)


class StaticStateProvider(BaseProvider):
    """Lee/escribe el estado observado en un archivo YAML."""

    name = "static"

    def __init__(self, path: Path, console: Optional[Console] = None) -> None:
        self.path = path
        self.console = console
        self._persistent: Dict[str, ProtocolPropertyMap] = self._load()
        self._overlay: Dict[str, ProtocolPropertyMap] = {}

    def _load(self) -> Dict[str, ProtocolPropertyMap]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ProviderError(f"YAML inválido en {self.path.name}: {e}") from e
        interfaces = data.get("interfaces", {}) if isinstance(data, dict) else None
        if not isinstance(interfaces, dict):
            raise ProviderError(f"{self.path.name}: 'interfaces' debe ser un diccionario")
        state: Dict[str, ProtocolPropertyMap] = {}
        for ifname, protos in interfaces.items():
            protos = protos or {}
            if not isinstance(protos, dict):
                raise ProviderError(f"{self.path.name}: interfaz '{ifname}' debe ser protocolo → propiedades")
            iface = state.setdefault(str(ifname), {})
            for proto, props in protos.items():
                props = props or {}
                if not isinstance(props, dict):
                    raise ProviderError(
                        f"{self.path.name}: '{ifname}.{proto}' debe ser un diccionario de propiedades"
                    )
                iface[str(proto)] = {str(k): coerce_raw(v) for k, v in props.items()}
        return state

    def _save(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                yaml.safe_dump({"interfaces": self._persistent}, f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise ProviderError(f"No se pudo guardar {self.path}: {e}") from e

    def fetch_observed(self, identity: str) -> ProtocolPropertyMap:
        observed: Dict[str, Any] = {}
        _merge(observed, identity, copy.deepcopy(self._persistent.get(identity, {})))
        _merge(observed, identity, copy.deepcopy(self._overlay.get(identity, {})))
        return observed[identity]

    def apply_desired(
        self,
        identity: str,
        properties: ProtocolPropertyMap,
        temporary: Optional[bool] = None,
    ) -> None:
        if temporary:
            _merge(self._overlay, identity, copy.deepcopy(properties))
            return
        _merge(self._persistent, identity, copy.deepcopy(properties))
        # Un cambio persistente reemplaza al temporal de la misma propiedad
        for proto, props in properties.items():
            for key in props:
                self._overlay.get(identity, {}).get(proto, {}).pop(key, None)
        self._save()
        if self.console:
            self.console.print(f"[dim]Estado guardado en {self.path}[/dim]")
