"""Read-only lookup over the region → subregion → locality hierarchy."""

from __future__ import annotations

from collections import defaultdict
from functools import lru_cache
from typing import Iterable, Sequence, TypeVar

from address_catalog.core.config import get_settings
from address_catalog.core.logging import get_logger
from address_catalog.core.models import Locality, LocationSelection, Region, Subregion

from .seed import SEED_LOCALITIES, SEED_REGIONS, SEED_SUBREGIONS
from .validators import collect_catalog_issues, ensure_valid_catalog

LOGGER = get_logger(__name__)

_EntryT = TypeVar("_EntryT", Region, Subregion, Locality)


def _matches(name: str, lowered_query: str) -> bool:
    return lowered_query in name.lower()


def _filter_by_name(entries: Iterable[_EntryT], query: str) -> list[_EntryT]:
    lowered_query = query.lower()
    return [entry for entry in entries if _matches(entry.name, lowered_query)]


def _normalize_name(value: str | None) -> str | None:
    if not value:
        return None
    cleaned = value.strip().lower()
    return cleaned or None


def _find_by_name(entries: Iterable[_EntryT], name: str | None) -> _EntryT | None:
    target = _normalize_name(name)
    if target is None:
        return None
    for entry in entries:
        if entry.name.strip().lower() == target:
            return entry
    return None


class LocationCatalog:
    """Immutable province/district/ward catalog backing cascading address selectors.

    Collections default to the bundled seed. Every list returned is a fresh copy
    of frozen entities, so callers cannot reach internal storage.
    """

    def __init__(
        self,
        regions: Sequence[Region] | None = None,
        subregions: Sequence[Subregion] | None = None,
        localities: Sequence[Locality] | None = None,
        *,
        strict: bool = True,
    ) -> None:
        self._regions: tuple[Region, ...] = tuple(SEED_REGIONS if regions is None else regions)
        self._subregions: tuple[Subregion, ...] = tuple(SEED_SUBREGIONS if subregions is None else subregions)
        self._localities: tuple[Locality, ...] = tuple(SEED_LOCALITIES if localities is None else localities)

        if strict:
            ensure_valid_catalog(self._regions, self._subregions, self._localities)
        else:
            issues = collect_catalog_issues(self._regions, self._subregions, self._localities)
            if issues:
                LOGGER.warning("location.catalog.integrity_issues", issues=issues)

        # First occurrence wins when a non-strict catalog carries duplicate codes.
        self._region_map: dict[str, Region] = {}
        for region in self._regions:
            self._region_map.setdefault(region.code, region)
        self._subregion_map: dict[str, Subregion] = {}
        for subregion in self._subregions:
            self._subregion_map.setdefault(subregion.code, subregion)
        self._locality_map: dict[str, Locality] = {}
        for locality in self._localities:
            self._locality_map.setdefault(locality.code, locality)

        subregions_by_region: dict[str, list[Subregion]] = defaultdict(list)
        for subregion in self._subregions:
            subregions_by_region[subregion.region_code].append(subregion)
        localities_by_subregion: dict[str, list[Locality]] = defaultdict(list)
        for locality in self._localities:
            localities_by_subregion[locality.subregion_code].append(locality)
        self._subregions_by_region = {code: tuple(items) for code, items in subregions_by_region.items()}
        self._localities_by_subregion = {code: tuple(items) for code, items in localities_by_subregion.items()}

        LOGGER.debug("location.catalog.loaded", **self.counts())

    def counts(self) -> dict[str, int]:
        return {
            "regions": len(self._regions),
            "subregions": len(self._subregions),
            "localities": len(self._localities),
        }

    # Cascading listings

    def list_regions(self) -> list[Region]:
        return list(self._regions)

    def list_subregions_by_region(self, region_code: str) -> list[Subregion]:
        """Return the subregions whose parent is ``region_code``, in seed order."""
        return list(self._subregions_by_region.get(region_code, ()))

    def list_localities_by_subregion(self, subregion_code: str) -> list[Locality]:
        """Return the localities whose parent is ``subregion_code``, in seed order."""
        return list(self._localities_by_subregion.get(subregion_code, ()))

    # Point lookups

    def get_region(self, code: str) -> Region | None:
        return self._region_map.get(code)

    def get_subregion(self, code: str) -> Subregion | None:
        return self._subregion_map.get(code)

    def get_locality(self, code: str) -> Locality | None:
        return self._locality_map.get(code)

    # Name search

    def search_regions(self, query: str) -> list[Region]:
        """Case-insensitive substring search on region names; empty query matches all."""
        return _filter_by_name(self._regions, query)

    def search_subregions(self, region_code: str, query: str) -> list[Subregion]:
        return _filter_by_name(self._subregions_by_region.get(region_code, ()), query)

    def search_localities(self, subregion_code: str, query: str) -> list[Locality]:
        return _filter_by_name(self._localities_by_subregion.get(subregion_code, ()), query)

    # Address helpers

    def selection_for(self, code: str | None) -> LocationSelection | None:
        """Resolve a code at any tier into its full ancestor chain."""
        if not code:
            return None
        locality = self._locality_map.get(code)
        if locality is not None:
            subregion = self._subregion_map.get(locality.subregion_code)
            region = self._region_map.get(subregion.region_code) if subregion else None
            if region is None:
                return None
            return LocationSelection(region=region, subregion=subregion, locality=locality)
        subregion = self._subregion_map.get(code)
        if subregion is not None:
            region = self._region_map.get(subregion.region_code)
            if region is None:
                return None
            return LocationSelection(region=region, subregion=subregion)
        region = self._region_map.get(code)
        if region is not None:
            return LocationSelection(region=region)
        return None

    def describe(self, code: str | None, separator: str = ", ") -> str:
        selection = self.selection_for(code)
        return selection.label(separator) if selection else ""

    def resolve_selection(
        self,
        region_name: str | None,
        subregion_name: str | None = None,
        locality_name: str | None = None,
    ) -> LocationSelection | None:
        """Map stored address names back onto catalog entries, tier by tier.

        The cascade stops at the first tier that is missing or unknown; that
        tier and everything below it stays ``None``.
        """
        region = _find_by_name(self._regions, region_name)
        if region is None:
            return None
        subregion = _find_by_name(self._subregions_by_region.get(region.code, ()), subregion_name)
        if subregion is None:
            return LocationSelection(region=region)
        locality = _find_by_name(self._localities_by_subregion.get(subregion.code, ()), locality_name)
        return LocationSelection(region=region, subregion=subregion, locality=locality)


@lru_cache(maxsize=1)
def get_location_catalog() -> LocationCatalog:
    """Return the shared seed catalog, built once per process."""
    return LocationCatalog(strict=get_settings().strict_validation)
