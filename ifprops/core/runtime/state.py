"""
Estado (State): forma del estado y diferencias deseado vs real.

El core NO lee ni escribe propiedades reales de interfaces;
eso lo hacen los providers (ver ifprops.core.infra.contracts).
"""

from typing import Any, Dict


# protocolo → propiedad → valor
ProtocolPropertyMap = Dict[str, Dict[str, Any]]


class StateDiff:
    """Diferencia entre estado deseado y real de una propiedad."""
    def __init__(
        self,
        resource_id: str,
        field: str,
        desired: Any,
        actual: Any,
        severity: str = "warning"
    ):
        self.resource_id = resource_id
        self.field = field
        self.desired = desired
        self.actual = actual
        self.severity = severity  # "error", "warning", "info"

    def __repr__(self) -> str:
        return (
            f"StateDiff({self.resource_id!r}, {self.field!r}, "
            f"desired={self.desired!r}, actual={self.actual!r}, severity={self.severity!r})"
        )

