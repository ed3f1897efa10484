"""Shared fixtures for address catalog tests."""
import pytest
import structlog

from address_catalog.core.config import get_settings
from address_catalog.core.logging import get_logger
from address_catalog.core.models import Locality, Region, Subregion
from address_catalog.location import catalog as catalog_module
from address_catalog.location.catalog import LocationCatalog, get_location_catalog


@pytest.fixture
def catalog():
    """Catalog built from the bundled seed data."""
    return LocationCatalog()


@pytest.fixture
def small_catalog_rows():
    """Two regions, three subregions, four localities with one shared ward name."""
    regions = [Region("AA", "Alpha Province"), Region("BB", "Beta Province")]
    subregions = [
        Subregion("AA-1", "North District", "AA"),
        Subregion("AA-2", "South District", "AA"),
        Subregion("BB-1", "North District", "BB"),
    ]
    localities = [
        Locality("AA-1-X", "Ward X", "AA-1"),
        Locality("AA-1-Y", "Ward Y", "AA-1"),
        Locality("AA-2-X", "Ward X", "AA-2"),
        Locality("BB-1-Z", "Ward Z", "BB-1"),
    ]
    return regions, subregions, localities


@pytest.fixture(autouse=True)
def _reset_cached_singletons(monkeypatch):
    """Settings, the shared catalog and structlog loggers are cached per process; isolate each test."""
    get_settings.cache_clear()
    get_location_catalog.cache_clear()
    # A cached logger would keep writing to the stdout capture of the test that first used it.
    monkeypatch.setattr(catalog_module, "LOGGER", get_logger(catalog_module.__name__))
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()
    get_location_catalog.cache_clear()
