"""
Address catalog package.

The package exposes modular building blocks for:
- an immutable province/district/ward catalog with cascading filters,
- name search and address label resolution over that catalog,
- integrity validation of seed data,
- settings and structured logging shared by the above.
"""

from .core.config import Settings, get_settings
from .core.models import Locality, LocationSelection, Region, Subregion
from .location import LocationCatalog, get_location_catalog

__all__ = [
    "Settings",
    "get_settings",
    "Region",
    "Subregion",
    "Locality",
    "LocationSelection",
    "LocationCatalog",
    "get_location_catalog",
]
