"""
Contrato que deben implementar los providers.

El core solo define interfaces; la implementación vive en ifprops/providers/*.
"""

from typing import Optional, Protocol

from ifprops.core.runtime.state import ProtocolPropertyMap


class ProviderContract(Protocol):
    """
    Contrato mínimo de un provider.
    Lee el estado real y aplica el deseado; serializa sus propias escrituras.
    """
    @property
    def name(self) -> str:
        """Identificador del provider (ej: memory, static)."""
        ...

    def fetch_observed(self, identity: str) -> ProtocolPropertyMap:
        """Estado real de la interfaz: protocolo → propiedad → valor."""
        ...

    def apply_desired(
        self,
        identity: str,
        properties: ProtocolPropertyMap,
        temporary: Optional[bool] = None,
    ) -> None:
        """Aplica el estado deseado. Lanza ProviderError si falla."""
        ...
