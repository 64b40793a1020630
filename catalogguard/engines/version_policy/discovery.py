"""Build file discovery: find and read Gradle scripts under a root."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from catalogguard.core.config import BUILD_FILE_SUFFIXES, DEFAULT_SKIP_DIRS
from catalogguard.engines.version_policy.models import ConfigurationSource
from catalogguard.exceptions import UnreadableSourceError


def discover_sources(
    root: Path,
    suffixes: Iterable[str] = BUILD_FILE_SUFFIXES,
    skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS,
) -> list[Path]:
    """Recursively collect build files under *root*, sorted by relative path.

    Directories named in *skip_dirs* (tool output, VCS metadata) are pruned.
    """
    suffixes = tuple(suffixes)
    skip = set(skip_dirs)
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if d not in skip]
        for name in filenames:
            if name.endswith(suffixes):
                candidate = Path(dirpath) / name
                if candidate.is_file():
                    found.append(candidate)
    return sorted(found, key=lambda p: p.relative_to(root).as_posix())


def read_source(path: Path, root: Path) -> ConfigurationSource:
    """Read one build file; I/O errors abort the run."""
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise UnreadableSourceError(path, exc.strerror or str(exc)) from exc
    return ConfigurationSource(
        path=path,
        relative_path=path.relative_to(root).as_posix(),
        text=text,
    )
