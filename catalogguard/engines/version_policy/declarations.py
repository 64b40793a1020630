"""Dependency declaration scanning and classification.

Recognizes declarations made with the standard Gradle configurations in
both DSL styles:
  - implementation("group:artifact:version")     Kotlin DSL
  - implementation 'group:artifact:version'      Groovy DSL
  - api(project(":submodule"))                   → not a coordinate, skipped
  - implementation(libs.some.alias)              → catalog alias, skipped
"""

from __future__ import annotations

import re

from catalogguard.engines.version_policy.constraints import ConstraintScan
from catalogguard.engines.version_policy.models import (
    ConfigurationSource,
    ConstrainedModuleSet,
    DeclarationSite,
    ModuleCoordinate,
    Violation,
    ViolationKind,
)

# Gradle configuration names (not exhaustive, but covers the common ones)
_CONFIGS = (
    r"(?:implementation|api|compileOnly|compileOnlyApi|runtimeOnly|"
    r"annotationProcessor|kapt|kaptTest|ksp|"
    r"testImplementation|testApi|testCompileOnly|testRuntimeOnly|"
    r"androidTestImplementation|debugImplementation|releaseImplementation|"
    r"compile|runtime|testCompile|testRuntime)"
)

# configuration("...") or configuration "..."; the coordinate is captured
# as-is and split later.
_DECL_RE = re.compile(
    rf"\b(?P<config>{_CONFIGS})"
    r"(?:\s*\(\s*|[ \t]+)"
    r"""(?P<quote>["'])"""
    r"""(?P<coord>[^"'\n]+)"""
    r"(?P=quote)"
)

# Any quoted three-segment coordinate, whatever call it sits in
_THREE_SEGMENT_RE = re.compile(
    r"""(["'])(?P<coord>[^"':\s/]+:[^"':\s/]+:[^"'\s/]+)\1"""
)


def scan_declarations(source: ConfigurationSource) -> list[DeclarationSite]:
    """Find every declaration call site in *source*, in text order."""
    return [
        DeclarationSite(
            file=source.relative_path,
            offset=m.start(),
            coordinate=m.group("coord"),
            configuration=m.group("config"),
            line=source.line_of(m.start()),
        )
        for m in _DECL_RE.finditer(source.text)
    ]


def classify(
    site: DeclarationSite,
    scan: ConstraintScan,
    constrained: ConstrainedModuleSet,
) -> ViolationKind | None:
    """Decide whether one declaration breaks the version policy.

    Returns the violation kind, or None when the site is exempt or is not a
    module coordinate at all.
    """
    if scan.covers(site.offset):
        return None

    coordinate = ModuleCoordinate.parse(site.coordinate)
    if coordinate is None:
        return None
    if coordinate.is_versioned:
        return ViolationKind.EXPLICIT_VERSION
    if coordinate.key in constrained:
        return None
    return ViolationKind.UNVERSIONED_WITHOUT_CONSTRAINT


def _stray_versions(source: ConfigurationSource, scan: ConstraintScan) -> list[Violation]:
    """Three-segment coordinates outside constraints, from any call syntax."""
    found: list[Violation] = []
    for m in _THREE_SEGMENT_RE.finditer(source.text):
        if scan.covers(m.start()):
            continue
        found.append(
            Violation(
                file=source.relative_path,
                coordinate=m.group("coord"),
                kind=ViolationKind.EXPLICIT_VERSION,
                offset=m.start(),
                line=source.line_of(m.start()),
            )
        )
    return found


def check_source(
    source: ConfigurationSource,
    scan: ConstraintScan,
    constrained: ConstrainedModuleSet,
) -> list[Violation]:
    """Return the violations of one build file in a stable order."""
    violations: list[Violation] = []
    for site in scan_declarations(source):
        kind = classify(site, scan, constrained)
        if kind is None:
            continue
        violations.append(
            Violation(
                file=site.file,
                coordinate=site.coordinate,
                kind=kind,
                offset=site.offset,
                line=site.line,
            )
        )

    reported = {v.key for v in violations}
    for stray in _stray_versions(source, scan):
        if stray.key in reported:
            continue
        reported.add(stray.key)
        violations.append(stray)
    return violations
