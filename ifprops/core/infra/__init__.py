"""
Contratos y base para providers de propiedades de interfaz.

Los providers (memoria, archivo de estado, ipadm) implementan estos contratos;
el core no depende de ningún provider concreto.
"""

from ifprops.core.infra.contracts import ProviderContract
from ifprops.core.infra.base import BaseProvider

__all__ = ["ProviderContract", "BaseProvider"]
