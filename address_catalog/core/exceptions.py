"""Custom exception hierarchy for the address catalog."""

from __future__ import annotations


class AddressCatalogError(Exception):
    """Base error for the address catalog package."""


class CatalogIntegrityError(AddressCatalogError):
    """Raised when a seed catalog breaks its code or parent-reference invariants."""

    def __init__(self, issues: list[str]) -> None:
        self.issues = list(issues)
        message = "Location catalog failed integrity checks:\n- " + "\n- ".join(self.issues)
        super().__init__(message)
