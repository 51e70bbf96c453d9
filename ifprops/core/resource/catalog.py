"""
Catálogo de recursos de una pasada de reconciliación.

Los interface_properties se indexan por su nombre canónico (ya sin sufijo de
protocolo). El resto de recursos (ip_interface, ...) se guardan como pares
(tipo, nombre) para resolver dependencias.
"""

from typing import Dict, Iterator, List, Optional

from ifprops.core.errors import DuplicateResource
from ifprops.core.resource.dependencies import CatalogResource
from ifprops.core.resource.models import RESOURCE_TYPE, InterfacePropertiesResource


class Catalog:
    """Registro de recursos keyed por nombre canónico."""

    def __init__(self) -> None:
        self._resources: Dict[str, InterfacePropertiesResource] = {}
        self._peers: List[CatalogResource] = []

    def add(self, resource: InterfacePropertiesResource) -> None:
        """Añade un recurso; dos declaraciones con el mismo nombre canónico es error."""
        existing = self._resources.get(resource.name)
        if existing is not None:
            raise DuplicateResource(
                f"'{resource.title or resource.name}' y '{existing.title or existing.name}' "
                f"resuelven al mismo recurso '{resource.name}'"
            )
        self._resources[resource.name] = resource

    def add_peer(self, peer: CatalogResource) -> None:
        self._peers.append(peer)

    def get(self, name: str) -> Optional[InterfacePropertiesResource]:
        return self._resources.get(name)

    def resources(self) -> List[InterfacePropertiesResource]:
        """Recursos en orden de declaración."""
        return list(self._resources.values())

    def names(self) -> List[str]:
        """Nombres ordenados. Útil para salidas deterministas."""
        return sorted(self._resources.keys())

    def peers(self) -> List[CatalogResource]:
        """Todos los recursos como (tipo, nombre), incluidos los interface_properties."""
        own = [CatalogResource(type=RESOURCE_TYPE, name=name) for name in self._resources]
        return list(self._peers) + own

    def requires(self, resource: InterfacePropertiesResource) -> List[str]:
        return resource.requires(self.peers())

    def __iter__(self) -> Iterator[InterfacePropertiesResource]:
        return iter(self._resources.values())

    def __len__(self) -> int:
        return len(self._resources)
