"""
Dependencia implícita: interface_properties se aplica después del ip_interface
que crea la interfaz. Los candidatos se inyectan (no hay catálogo global).
"""

from typing import Iterable, List

from pydantic import BaseModel, Field


RAW_INTERFACE_TYPE = "ip_interface"


class CatalogResource(BaseModel):
    """Descriptor (tipo, nombre) de un recurso del catálogo."""
    type: str = Field(..., description="Tipo de recurso (ej: ip_interface)")
    name: str = Field(..., description="Nombre del recurso (ej: net0)")


def depends_on(identity: str, candidates: Iterable[CatalogResource]) -> List[str]:
    """
    Nombres de los ip_interface cuyo nombre coincide con algún segmento de identity.
    Ninguna coincidencia no es error: lo resuelve el grafo de dependencias.
    """
    segments = identity.split("/")
    return [
        c.name
        for c in candidates
        if c.type == RAW_INTERFACE_TYPE and c.name in segments
    ]
