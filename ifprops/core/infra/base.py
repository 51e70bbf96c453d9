"""
Base opcional para providers: implementación por defecto de métodos comunes.

Los providers pueden heredar de aquí o implementar solo el contrato (Protocol).
"""

from typing import Optional

from ifprops.core.errors import ProviderError
from ifprops.core.runtime.state import ProtocolPropertyMap


class BaseProvider:
    """Base opcional para providers; no obligatorio usar herencia."""

    name: str = "base"

    def fetch_observed(self, identity: str) -> ProtocolPropertyMap:
        """Por defecto: sin estado."""
        return {}

    def apply_desired(
        self,
        identity: str,
        properties: ProtocolPropertyMap,
        temporary: Optional[bool] = None,
    ) -> None:
        """Por defecto: no sabe aplicar."""
        raise ProviderError(f"El provider '{self.name}' no puede aplicar cambios en {identity}")
