"""Version-policy verifier: discover, extract constraints, classify, report."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import TypeVar

import structlog

from catalogguard.core.config import VerifierSettings
from catalogguard.engines.version_policy.constraints import (
    ConstraintScan,
    collect_constrained_modules,
    extract_constraints,
)
from catalogguard.engines.version_policy.declarations import (
    check_source,
    classify,
    scan_declarations,
)
from catalogguard.engines.version_policy.discovery import discover_sources, read_source
from catalogguard.engines.version_policy.models import (
    ConfigurationSource,
    DeclarationSite,
    VerificationReport,
    Violation,
    ViolationKind,
)
from catalogguard.exceptions import PolicyViolationError

log = structlog.get_logger("catalogguard.engine")

_T = TypeVar("_T")
_R = TypeVar("_R")


def _map(fn: Callable[[_T], _R], items: Iterable[_T], max_workers: int) -> list[_R]:
    """Ordered map, on a thread pool when more than one worker is allowed."""
    items = list(items)
    if max_workers <= 1 or len(items) <= 1:
        return [fn(item) for item in items]
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(fn, items))


def verify_sources(
    sources: list[ConfigurationSource],
    settings: VerifierSettings | None = None,
) -> VerificationReport:
    """Run the policy over already-read sources.

    Constraint extraction finishes for every file before any declaration is
    classified: a constraint in one file can exempt a declaration in another.
    """
    settings = settings or VerifierSettings()

    scans: list[ConstraintScan] = _map(
        lambda s: extract_constraints(s, settings.lookahead_window),
        sources,
        settings.max_workers,
    )
    constrained = collect_constrained_modules(scans)
    log.debug(
        "version_policy.constraints_collected",
        files=len(sources),
        constrained=len(constrained),
    )

    per_file: list[list[Violation]] = _map(
        lambda pair: check_source(pair[0], pair[1], constrained),
        zip(sources, scans),
        settings.max_workers,
    )
    violations = [v for file_violations in per_file for v in file_violations]
    return VerificationReport(violations=violations, files_scanned=len(sources))


def verify(root: Path, settings: VerifierSettings | None = None) -> VerificationReport:
    """Scan every build file under *root* and return the report."""
    settings = settings or VerifierSettings()
    root = Path(root)
    paths = discover_sources(root, settings.suffixes, settings.skip_dirs)
    if not paths:
        log.info("version_policy.no_build_files", root=str(root))
        return VerificationReport()

    sources = [read_source(p, root) for p in paths]
    return verify_sources(sources, settings)


def declaration_report(
    root: Path, settings: VerifierSettings | None = None
) -> list[tuple[DeclarationSite, ViolationKind | None]]:
    """List every declaration under *root* with its policy verdict."""
    settings = settings or VerifierSettings()
    root = Path(root)
    sources = [
        read_source(p, root)
        for p in discover_sources(root, settings.suffixes, settings.skip_dirs)
    ]
    scans = [extract_constraints(s, settings.lookahead_window) for s in sources]
    constrained = collect_constrained_modules(scans)
    return [
        (site, classify(site, scan, constrained))
        for source, scan in zip(sources, scans)
        for site in scan_declarations(source)
    ]


def enforce(root: Path, settings: VerifierSettings | None = None) -> VerificationReport:
    """Verify *root* and raise :class:`PolicyViolationError` on any violation.

    Every violation is logged individually before the error is raised.
    """
    report = verify(root, settings)
    if report.passed:
        log.info(
            "No direct dependency versions found, build is clean",
            files_scanned=report.files_scanned,
        )
        return report

    for violation in report.violations:
        log.error(
            violation.message,
            file=violation.file,
            line=violation.line,
            coordinate=violation.coordinate,
            kind=violation.kind.value,
        )
    raise PolicyViolationError(report)
