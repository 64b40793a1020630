"""Version-policy verifier: forbid hardcoded dependency versions in Gradle scripts."""

from catalogguard.engines.version_policy.models import (
    VerificationReport,
    Violation,
    ViolationKind,
)
from catalogguard.engines.version_policy.verifier import enforce, verify, verify_sources

__all__ = [
    "VerificationReport",
    "Violation",
    "ViolationKind",
    "enforce",
    "verify",
    "verify_sources",
]
