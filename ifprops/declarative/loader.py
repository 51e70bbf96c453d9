"""
Loader del manifiesto declarativo (interfaces.yaml) → Catalog.

Formato esperado:
  resources:
    - type: interface_properties
      name: net0/ipv4            # sintaxis antigua
      temporary: true
      properties: {mtu: 1776}
    - type: interface_properties
      name: net1
      properties:
        ipv4: {mtu: "9000"}
        ip: {standby: "on"}
    - type: ip_interface
      name: net0
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from pydantic import ValidationError
from rich.console import Console

from ifprops.core.errors import ConfigError
from ifprops.core.resource.catalog import Catalog
from ifprops.core.resource.dependencies import CatalogResource
from ifprops.core.resource.models import RESOURCE_TYPE, InterfacePropertiesResource


def _resource_from_dict(idx: int, raw: Any) -> Any:
    if not isinstance(raw, dict):
        raise ConfigError(f"resources[{idx}] debe ser un diccionario")
    rtype = raw.get("type")
    name = raw.get("name")
    if not isinstance(rtype, str) or not rtype:
        raise ConfigError(f"resources[{idx}] sin 'type'")
    if not isinstance(name, str) or not name:
        raise ConfigError(f"resources[{idx}] sin 'name'")

    if rtype != RESOURCE_TYPE:
        return CatalogResource(type=rtype, name=name)

    data = {k: v for k, v in raw.items() if k != "type"}
    try:
        return InterfacePropertiesResource(**data)
    except ValidationError as e:
        raise ConfigError(f"Recurso inválido '{name}': {e}") from e


def catalog_from_dict(data: Dict[str, Any]) -> Catalog:
    """
    Construye el catálogo desde un dict ya parseado.
    Los errores de identidad/ensure/protocolo se propagan con su tipo.
    """
    if not isinstance(data, dict):
        raise ConfigError("El manifiesto debe ser un diccionario con 'resources'")
    raw_resources = data.get("resources", [])
    if raw_resources is None:
        raw_resources = []
    if not isinstance(raw_resources, list):
        raise ConfigError("'resources' debe ser una lista")

    catalog = Catalog()
    for idx, raw in enumerate(raw_resources):
        resource = _resource_from_dict(idx, raw)
        if isinstance(resource, InterfacePropertiesResource):
            catalog.add(resource)
        else:
            catalog.add_peer(resource)
    return catalog


def load_manifest(path: Path, console: Optional[Console] = None) -> Catalog:
    """Carga y valida el manifiesto YAML."""
    if not path.exists():
        raise ConfigError(f"No existe el manifiesto: {path}")
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML inválido en {path.name}: {e}") from e

    catalog = catalog_from_dict(data)
    if console:
        console.print(f"[dim]Cargados {len(catalog)} recursos de {path}[/dim]")
    return catalog
