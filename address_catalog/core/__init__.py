"""Shared core utilities for the address catalog."""

from .config import Settings, get_settings
from .exceptions import AddressCatalogError, CatalogIntegrityError
from .logging import configure_logging, get_logger
from .models import Locality, LocationSelection, Region, Subregion

__all__ = [
    "Settings",
    "Region",
    "Subregion",
    "Locality",
    "LocationSelection",
    "AddressCatalogError",
    "CatalogIntegrityError",
    "get_settings",
    "configure_logging",
    "get_logger",
]
