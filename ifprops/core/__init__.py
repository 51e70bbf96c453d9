"""
Core: lógica pura de interface_properties.

ENFORCEMENT (arquitectura limpia):
- Este paquete NO debe importar: ifprops.cli, ifprops.providers (implementaciones),
  ifprops.declarative ni módulos que accedan al filesystem real.
- Permitido: typing, re, pydantic, ifprops.core.* (errors, resource, runtime, infra).
- Los providers, el loader y la CLI importan desde core; nunca al revés.
"""

from ifprops.core.errors import (
    IfPropsError,
    ResourceValidationError,
    InvalidFormat,
    InvalidLength,
    MissingProtocol,
    InvalidProperty,
    UnsupportedEnsureValue,
    ConfigError,
    DuplicateResource,
    ProviderError,
)

__all__ = [
    "IfPropsError",
    "ResourceValidationError",
    "InvalidFormat",
    "InvalidLength",
    "MissingProtocol",
    "InvalidProperty",
    "UnsupportedEnsureValue",
    "ConfigError",
    "DuplicateResource",
    "ProviderError",
]
