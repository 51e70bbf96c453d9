"""
Sistema declarativo: manifiesto YAML de recursos interface_properties.
"""

from ifprops.declarative.loader import catalog_from_dict, load_manifest

__all__ = ["catalog_from_dict", "load_manifest"]
