"""catalogguard: version-catalog conventions and direct-version checks for Gradle builds."""

__version__ = "0.1.0"

from catalogguard.engines.version_policy import (
    VerificationReport,
    Violation,
    ViolationKind,
    enforce,
    verify,
)
from catalogguard.exceptions import (
    CatalogGuardError,
    CatalogResourceError,
    PolicyViolationError,
    UnreadableSourceError,
)

__all__ = [
    "CatalogGuardError",
    "CatalogResourceError",
    "PolicyViolationError",
    "UnreadableSourceError",
    "VerificationReport",
    "Violation",
    "ViolationKind",
    "enforce",
    "verify",
]
