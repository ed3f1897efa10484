"""Shared data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Region:
    code: str
    name: str

    def as_dict(self) -> dict[str, str]:
        return {"code": self.code, "name": self.name}


@dataclass(slots=True, frozen=True)
class Subregion:
    code: str
    name: str
    region_code: str

    def as_dict(self) -> dict[str, str]:
        return {"code": self.code, "name": self.name, "regionCode": self.region_code}


@dataclass(slots=True, frozen=True)
class Locality:
    code: str
    name: str
    subregion_code: str

    def as_dict(self) -> dict[str, str]:
        return {"code": self.code, "name": self.name, "subregionCode": self.subregion_code}


@dataclass(slots=True, frozen=True)
class LocationSelection:
    """A cascade selection, filled from the region tier downwards."""

    region: Region
    subregion: Subregion | None = None
    locality: Locality | None = None

    def codes(self) -> tuple[str, str | None, str | None]:
        return (
            self.region.code,
            self.subregion.code if self.subregion else None,
            self.locality.code if self.locality else None,
        )

    def label(self, separator: str = ", ") -> str:
        """Return the display label, most specific tier first."""
        parts = [entry.name for entry in (self.locality, self.subregion, self.region) if entry is not None]
        return separator.join(parts)
