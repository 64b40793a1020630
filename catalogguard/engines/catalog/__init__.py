"""Version catalog installer."""

from catalogguard.engines.catalog.installer import bundled_catalog_text, install_catalog

__all__ = ["bundled_catalog_text", "install_catalog"]
