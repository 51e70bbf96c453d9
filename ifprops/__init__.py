"""
ifprops: propiedades de protocolo de interfaces de red (MTU, standby, ...)
gestionadas de forma declarativa.
"""

__version__ = "1.0.0"
