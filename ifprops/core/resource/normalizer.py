"""
Normalización de propiedades a la forma canónica protocolo → propiedad → valor.

Formatos aceptados:

  Preferido (canónico):
    name: net0
    properties: {ipv4: {mtu: "1776"}, ipv6: {mtu: "2048"}}

  Antiguo (hash plano, protocolo en el nombre):
    name: net0/ipv4
    properties: {mtu: "1776"}

El formato antiguo se convierte y el nombre pierde el sufijo de protocolo.
No se modifica nada en sitio: se devuelve el nuevo nombre y el llamador
(modelo o catálogo) re-indexa por él.
"""

from typing import Any, Dict, Mapping, Tuple

from ifprops.core.errors import InvalidFormat, MissingProtocol
from ifprops.core.resource.identity import PROTOCOLS, split_identity


def is_legacy_syntax(value: Mapping[str, Any]) -> bool:
    """True si ninguna clave de primer nivel es un protocolo."""
    return not (set(value.keys()) & PROTOCOLS)


def normalize_properties(
    identity: str,
    value: Mapping[str, Any],
) -> Tuple[str, Dict[str, Any]]:
    """
    Devuelve (nuevo_nombre, propiedades_canónicas).

    Idempotente: aplicado sobre su propia salida devuelve el mismo par.

    Raises:
        MissingProtocol: sintaxis antigua sin protocolo en el nombre (net0, net0/).
        InvalidFormat: sintaxis antigua con un protocolo desconocido.
    """
    if not is_legacy_syntax(value):
        return identity, value  # type: ignore[return-value]

    ifname, proto = split_identity(identity)
    if not proto:
        raise MissingProtocol(
            f"'{identity}': el protocolo debe definirse en el nombre (net0/ipv4) "
            "o en el hash de propiedades ({ipv4: {...}})"
        )
    if proto not in PROTOCOLS:
        raise InvalidFormat(f"'{identity}': protocolo desconocido '{proto}'")

    return ifname, {proto: dict(value)}
