"""
Errores de ifprops.

El core solo define excepciones; la CLI se encarga del formato de salida.

Ninguna hereda de ValueError: así los validadores de Pydantic no las envuelven
y el llamador recibe el tipo exacto (InvalidFormat, MissingProtocol, ...).
"""


class IfPropsError(Exception):
    """Error base de ifprops."""
    pass


class ResourceValidationError(IfPropsError):
    """El recurso no cumple las reglas de identidad o de propiedades."""
    pass


class InvalidFormat(ResourceValidationError):
    """El nombre no coincide con el patrón interfaz[/protocolo]."""
    pass


class InvalidLength(ResourceValidationError):
    """El nombre de interfaz no tiene entre 3 y 16 caracteres."""
    pass


class MissingProtocol(ResourceValidationError):
    """Sintaxis antigua (hash plano) sin protocolo en el nombre."""
    pass


class InvalidProperty(ResourceValidationError):
    """Propiedad no gestionable para el protocolo indicado."""
    pass


class UnsupportedEnsureValue(IfPropsError):
    """ensure = absent: las propiedades de interfaz no se pueden eliminar."""
    pass


class ConfigError(IfPropsError):
    """Error de configuración (archivo faltante, formato inválido)."""
    pass


class DuplicateResource(ConfigError):
    """Dos entradas del manifiesto resuelven al mismo nombre canónico."""
    pass


class ProviderError(IfPropsError):
    """Error delegado desde un provider (lectura o aplicación de estado)."""
    pass
