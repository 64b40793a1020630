"""Custom exceptions for catalogguard."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from catalogguard.engines.version_policy.models import VerificationReport


class CatalogGuardError(Exception):
    """Base exception for all catalogguard errors."""


class PolicyViolationError(CatalogGuardError):
    """Raised after a full scan when the version policy found violations."""

    def __init__(self, report: VerificationReport):
        self.report = report
        self.count = len(report.violations)
        super().__init__(
            f"Found {self.count} direct dependency version(s). Use libs.* aliases instead."
        )


class UnreadableSourceError(CatalogGuardError):
    """Raised when a discovered build file cannot be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read build file {path}: {reason}")


class CatalogResourceError(CatalogGuardError):
    """Raised when the bundled version catalog is missing from the package."""
