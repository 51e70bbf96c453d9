"""
Runtime: resolución de rutas (estado observado, manifiesto) y contratos de estado.
"""

from ifprops.core.runtime.resolver import state_file, manifest_file

__all__ = ["state_file", "manifest_file"]
