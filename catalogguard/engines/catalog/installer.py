"""Install the bundled version catalog into a Gradle project."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

import structlog

from catalogguard.exceptions import CatalogResourceError

log = structlog.get_logger("catalogguard.engine")

CATALOG_RESOURCE = "libs.versions.toml"
GENERATED_CATALOG = Path("build/generated/catalogs") / CATALOG_RESOURCE


def bundled_catalog_text() -> str:
    """Return the catalog shipped as package data."""
    resource = resources.files("catalogguard.resources.catalogs") / CATALOG_RESOURCE
    try:
        return resource.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise CatalogResourceError(
            f"Could not find catalogs/{CATALOG_RESOURCE} in package resources"
        ) from exc


def install_catalog(root: Path) -> Path:
    """Write the bundled catalog under *root* and return its path.

    The file is overwritten on every call so it always matches the installed
    package version.
    """
    target = Path(root) / GENERATED_CATALOG
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(bundled_catalog_text(), encoding="utf-8")
    log.info("catalog.installed", path=str(target))
    return target
