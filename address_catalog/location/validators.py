"""Integrity checks for location catalogs."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from address_catalog.core.exceptions import CatalogIntegrityError
from address_catalog.core.models import Locality, Region, Subregion


def _blank_field_issues(kind: str, entries: Iterable[Region | Subregion | Locality]) -> list[str]:
    issues: list[str] = []
    for index, entry in enumerate(entries):
        if not entry.code or not entry.code.strip():
            issues.append(f"{kind} #{index} has an empty code.")
        if not entry.name or not entry.name.strip():
            issues.append(f"{kind} '{entry.code}' has an empty name.")
    return issues


def _duplicate_code_issues(kind: str, entries: Iterable[Region | Subregion | Locality]) -> list[str]:
    counts = Counter(entry.code for entry in entries)
    return [f"Duplicate {kind.lower()} code '{code}' ({count} entries)." for code, count in counts.items() if count > 1]


def collect_catalog_issues(
    regions: Sequence[Region],
    subregions: Sequence[Subregion],
    localities: Sequence[Locality],
) -> list[str]:
    """Return every integrity issue found in the three collections."""
    issues: list[str] = []
    for kind, entries in (("Region", regions), ("Subregion", subregions), ("Locality", localities)):
        issues.extend(_blank_field_issues(kind, entries))
        issues.extend(_duplicate_code_issues(kind, entries))

    region_codes = {region.code for region in regions}
    for subregion in subregions:
        if subregion.region_code not in region_codes:
            issues.append(f"Subregion '{subregion.code}' references unknown region '{subregion.region_code}'.")

    subregion_codes = {subregion.code for subregion in subregions}
    for locality in localities:
        if locality.subregion_code not in subregion_codes:
            issues.append(f"Locality '{locality.code}' references unknown subregion '{locality.subregion_code}'.")
    return issues


def ensure_valid_catalog(
    regions: Sequence[Region],
    subregions: Sequence[Subregion],
    localities: Sequence[Locality],
) -> None:
    """Raise CatalogIntegrityError when any integrity issue is found."""
    issues = collect_catalog_issues(regions, subregions, localities)
    if issues:
        raise CatalogIntegrityError(issues)
