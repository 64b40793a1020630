"""Verifier settings, with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

BUILD_FILE_SUFFIXES: tuple[str, ...] = (".gradle.kts", ".gradle")

DEFAULT_SKIP_DIRS: frozenset[str] = frozenset({".git", ".gradle", "build", "node_modules"})

# How far past a two-segment coordinate inside a constraints block we look
# for a strictly(...) / version marker.
DEFAULT_LOOKAHEAD_WINDOW = 300


@dataclass(frozen=True)
class VerifierSettings:
    suffixes: tuple[str, ...] = BUILD_FILE_SUFFIXES
    skip_dirs: frozenset[str] = field(default_factory=lambda: DEFAULT_SKIP_DIRS)
    lookahead_window: int = DEFAULT_LOOKAHEAD_WINDOW
    max_workers: int = 1

    @classmethod
    def from_env(cls) -> VerifierSettings:
        """Build settings from ``CATALOGGUARD_*`` environment variables.

        CATALOGGUARD_LOOKAHEAD_WINDOW: characters scanned for a version marker
        CATALOGGUARD_SKIP_DIRS:        comma-separated directory names to skip
        CATALOGGUARD_MAX_WORKERS:      threads used for per-file analysis
        """
        skip_env = os.environ.get("CATALOGGUARD_SKIP_DIRS")
        skip_dirs = (
            frozenset(d.strip() for d in skip_env.split(",") if d.strip())
            if skip_env is not None
            else DEFAULT_SKIP_DIRS
        )
        window = int(
            os.environ.get("CATALOGGUARD_LOOKAHEAD_WINDOW", str(DEFAULT_LOOKAHEAD_WINDOW))
        )
        if window < 0:
            raise ValueError(f"CATALOGGUARD_LOOKAHEAD_WINDOW must be >= 0, got {window}")
        workers = int(os.environ.get("CATALOGGUARD_MAX_WORKERS", "1"))
        return cls(
            skip_dirs=skip_dirs,
            lookahead_window=window,
            max_workers=max(1, workers),
        )
