"""
Resolución de rutas de estado y manifiesto.

- state_file(): archivo YAML de estado observado (IFPROPS_STATE_FILE).
- manifest_file(): manifiesto declarativo de recursos (IFPROPS_MANIFEST).

El core NO lee ni escribe en disco; solo expone estas rutas. Las opciones
de la CLI tienen prioridad sobre las variables de entorno.
"""

import os
from pathlib import Path


# Ruta canónica del estado observado (fuera del repo)
DEFAULT_STATE_FILE = Path("/var/lib/ifprops/state.yaml")

DEFAULT_MANIFEST = Path("interfaces.yaml")


def state_file() -> Path:
    explicit = os.environ.get("IFPROPS_STATE_FILE", "").strip()
    if explicit:
        return Path(explicit).expanduser()
    return DEFAULT_STATE_FILE


def manifest_file() -> Path:
    explicit = os.environ.get("IFPROPS_MANIFEST", "").strip()
    if explicit:
        return Path(explicit).expanduser()
    return DEFAULT_MANIFEST
