"""Location lookup for cascading province/district/ward selectors."""

from .catalog import LocationCatalog, get_location_catalog
from .validators import collect_catalog_issues, ensure_valid_catalog

__all__ = ["LocationCatalog", "collect_catalog_issues", "ensure_valid_catalog", "get_location_catalog"]
