"""Constraint-block extraction.

A ``constraints { ... }`` block inside ``dependencies`` is where a build file
may legitimately pin a version, e.g.::

    constraints {
        implementation("org.springframework.boot:spring-boot-starter-web:3.3.4") {
            because("Force Spring Boot web - override plugin catalog")
        }
        implementation("com.example:lib") {
            version { strictly("2.0.0") }
        }
    }

Blocks are delimited with a depth-counting brace matcher so nested lambdas
(``because``, ``version { ... }``) stay inside the region.  The modules they
pin form the project-wide constrained set that exempts unversioned
declarations elsewhere.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

import structlog

from catalogguard.core.config import DEFAULT_LOOKAHEAD_WINDOW
from catalogguard.engines.version_policy.models import (
    ConfigurationSource,
    ConstrainedModuleSet,
    ConstraintRegion,
    ModuleKey,
)

log = structlog.get_logger("catalogguard.engine")

_CONSTRAINTS_OPEN_RE = re.compile(r"\bconstraints\s*\{")

# "group:artifact:version": three colon-free segments inside quotes
_VERSIONED_RE = re.compile(
    r"""(["'])([^"':\s]+):([^"':\s]+):([^"':\s]+)\1"""
)

# "group:artifact": exactly two segments
_UNVERSIONED_RE = re.compile(
    r"""(["'])([^"':\s]+):([^"':\s]+)\1"""
)

_VERSION_MARKER_RE = re.compile(r"\bstrictly\s*\(|\bversion\b")

VersionMarkerPolicy = Callable[[str], bool]


def has_version_marker(lookahead: str) -> bool:
    """Heuristic: does a ``strictly(`` call or ``version`` keyword follow?

    This is a bounded text window, not a structural parse; a marker that
    belongs to the next declaration in the block is also accepted.
    """
    return _VERSION_MARKER_RE.search(lookahead) is not None


@dataclass
class ConstraintScan:
    """Constraint extraction result for one file."""

    file: str
    regions: list[ConstraintRegion] = field(default_factory=list)
    modules: set[ModuleKey] = field(default_factory=set)
    malformed: bool = False

    def covers(self, offset: int) -> bool:
        return any(r.contains(offset) for r in self.regions)


def _match_brace(text: str, open_index: int) -> int | None:
    """Return the index of the ``}`` closing the ``{`` at *open_index*."""
    depth = 0
    for i in range(open_index, len(text)):
        ch = text[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
    return None


def find_constraint_regions(
    source: ConfigurationSource,
) -> tuple[list[ConstraintRegion], bool]:
    """Locate every constraints block; the flag is True if one never closes.

    Extraction stops at the first unbalanced block, keeping earlier regions.
    """
    regions: list[ConstraintRegion] = []
    text = source.text
    pos = 0
    while True:
        m = _CONSTRAINTS_OPEN_RE.search(text, pos)
        if m is None:
            return regions, False
        open_index = m.end() - 1
        close_index = _match_brace(text, open_index)
        if close_index is None:
            return regions, True
        regions.append(
            ConstraintRegion(file=source.relative_path, start=m.start(), end=close_index + 1)
        )
        pos = close_index + 1


def pinned_modules(
    block: str,
    lookahead_window: int = DEFAULT_LOOKAHEAD_WINDOW,
    marker_policy: VersionMarkerPolicy = has_version_marker,
) -> set[ModuleKey]:
    """Collect the (group, artifact) keys a block's text supplies a version for."""
    modules: set[ModuleKey] = set()
    for m in _VERSIONED_RE.finditer(block):
        modules.add((m.group(2), m.group(3)))
    for m in _UNVERSIONED_RE.finditer(block):
        lookahead = block[m.end() : m.end() + lookahead_window]
        if marker_policy(lookahead):
            modules.add((m.group(2), m.group(3)))
    return modules


def extract_constraints(
    source: ConfigurationSource,
    lookahead_window: int = DEFAULT_LOOKAHEAD_WINDOW,
    marker_policy: VersionMarkerPolicy = has_version_marker,
) -> ConstraintScan:
    regions, malformed = find_constraint_regions(source)
    if malformed:
        log.warning(
            "version_policy.unbalanced_constraints",
            file=source.relative_path,
            regions_kept=len(regions),
        )

    scan = ConstraintScan(file=source.relative_path, regions=regions, malformed=malformed)
    for region in regions:
        # Inner text only: between the opening and the closing brace.
        open_index = source.text.index("{", region.start)
        block = source.text[open_index + 1 : region.end - 1]
        scan.modules |= pinned_modules(block, lookahead_window, marker_policy)
    return scan


def collect_constrained_modules(scans: Iterable[ConstraintScan]) -> ConstrainedModuleSet:
    """Fold every file's pinned modules into the project-wide set."""
    modules: set[ModuleKey] = set()
    for scan in scans:
        modules |= scan.modules
    return frozenset(modules)
