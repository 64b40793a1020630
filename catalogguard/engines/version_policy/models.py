"""Data models for the version-policy verifier."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

ModuleKey = tuple[str, str]

# Keys of every (group, artifact) that a constraints block pins, project-wide.
ConstrainedModuleSet = frozenset[ModuleKey]


@dataclass(frozen=True)
class ConfigurationSource:
    """One build file and its full text."""

    path: Path
    relative_path: str  # POSIX, relative to the scanned root
    text: str

    def line_of(self, offset: int) -> int:
        return self.text.count("\n", 0, offset) + 1


@dataclass(frozen=True)
class ModuleCoordinate:
    group: str
    artifact: str
    version: str | None = None

    @classmethod
    def parse(cls, notation: str) -> ModuleCoordinate | None:
        """Parse ``group:artifact[:version[:...]]``; None for anything shorter."""
        parts = notation.strip().split(":")
        if len(parts) < 2 or any(not p for p in parts[:3]):
            return None
        version = parts[2] if len(parts) >= 3 else None
        return cls(group=parts[0], artifact=parts[1], version=version)

    @property
    def key(self) -> ModuleKey:
        return (self.group, self.artifact)

    @property
    def is_versioned(self) -> bool:
        return self.version is not None


@dataclass(frozen=True)
class ConstraintRegion:
    """Half-open span ``[start, end)`` of one constraints block."""

    file: str
    start: int
    end: int

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end


@dataclass(frozen=True)
class DeclarationSite:
    file: str
    offset: int
    coordinate: str
    configuration: str
    line: int


class ViolationKind(Enum):
    EXPLICIT_VERSION = "explicit-version-forbidden"
    UNVERSIONED_WITHOUT_CONSTRAINT = "unversioned-without-constraint"


@dataclass(frozen=True)
class Violation:
    file: str
    coordinate: str
    kind: ViolationKind
    offset: int
    line: int

    @property
    def key(self) -> tuple[str, str, ViolationKind]:
        return (self.file, self.coordinate, self.kind)

    @property
    def message(self) -> str:
        if self.kind is ViolationKind.EXPLICIT_VERSION:
            return f"Found direct version in {self.file} -> {self.coordinate}"
        return (
            f"Found direct dependency without version in {self.file} -> "
            f"{self.coordinate} (no constraint found)"
        )


@dataclass
class VerificationReport:
    """Result of one verification run."""

    violations: list[Violation] = field(default_factory=list)
    files_scanned: int = 0

    @property
    def passed(self) -> bool:
        return not self.violations

    @property
    def failed(self) -> bool:
        return bool(self.violations)
