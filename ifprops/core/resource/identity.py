"""
Identidad del recurso: nombre de interfaz con sufijo de protocolo opcional.

  net0          → interfaz net0, protocolo definido en el hash de propiedades
  net0/ipv4     → sintaxis antigua: el protocolo viaja en el nombre
  net0/         → el patrón lo admite, pero no aporta protocolo (ver normalizer)
"""

import re
from typing import FrozenSet, Literal, Tuple

from ifprops.core.errors import InvalidFormat, InvalidLength


# --- Tipos base (Literal para serialización YAML/JSON) ---

ProtocolName = Literal["ip", "ipv4", "ipv6"]

PROTOCOLS: FrozenSet[str] = frozenset({"ip", "ipv4", "ipv6"})

IFNAME_MIN_LENGTH = 3
IFNAME_MAX_LENGTH = 16

IDENTITY_PATTERN = re.compile(r"[a-z_0-9]+[0-9]+(?:/(?:ip|ipv4|ipv6)?)?")


def split_identity(identity: str) -> Tuple[str, str]:
    """
    Separa interfaz y protocolo en el primer '/'.
    Si no hay protocolo (sin '/' o '/' final) devuelve "" como protocolo.
    """
    ifname, _, proto = identity.partition("/")
    return ifname, proto


def validate_identity(identity: str) -> None:
    """
    Valida el nombre del recurso.

    Raises:
        InvalidFormat: si no coincide con el patrón (se comprueba primero).
        InvalidLength: si la interfaz no tiene entre 3 y 16 caracteres.
    """
    if not isinstance(identity, str) or not IDENTITY_PATTERN.fullmatch(identity):
        raise InvalidFormat(
            f"Nombre de interfaz inválido '{identity}': debe coincidir con a-z _ 0-9 "
            "terminado en dígito, opcionalmente seguido de /ip, /ipv4 o /ipv6"
        )
    ifname, _ = split_identity(identity)
    if not IFNAME_MIN_LENGTH <= len(ifname) <= IFNAME_MAX_LENGTH:
        raise InvalidLength(
            f"Interfaz inválida '{identity}': debe tener entre "
            f"{IFNAME_MIN_LENGTH} y {IFNAME_MAX_LENGTH} caracteres"
        )

