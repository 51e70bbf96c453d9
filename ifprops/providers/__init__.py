"""
Providers de estado: implementan ProviderContract (ifprops.core.infra).
"""

from ifprops.providers.memory import InMemoryProvider
from ifprops.providers.static import StaticStateProvider

__all__ = ["InMemoryProvider", "StaticStateProvider"]
