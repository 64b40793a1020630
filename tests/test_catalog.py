"""Tests for the bundled version catalog installer."""

from __future__ import annotations

import tomllib
from unittest.mock import patch

import pytest

from catalogguard.engines.catalog import installer
from catalogguard.engines.catalog.installer import bundled_catalog_text, install_catalog
from catalogguard.exceptions import CatalogResourceError


class TestBundledCatalog:
    def test_is_valid_toml_with_libraries(self):
        catalog = tomllib.loads(bundled_catalog_text())
        assert "spring-boot" in catalog["versions"]
        web = catalog["libraries"]["spring-boot-starter-web"]
        assert web["module"] == "org.springframework.boot:spring-boot-starter-web"

    def test_missing_resource(self):
        with patch.object(installer, "CATALOG_RESOURCE", "missing.toml"):
            with pytest.raises(CatalogResourceError):
                bundled_catalog_text()


class TestInstallCatalog:
    def test_writes_generated_file(self, tmp_path):
        target = install_catalog(tmp_path)
        assert target == tmp_path / "build" / "generated" / "catalogs" / "libs.versions.toml"
        assert target.read_text() == bundled_catalog_text()

    def test_overwrites_stale_copy(self, tmp_path):
        target = tmp_path / "build" / "generated" / "catalogs" / "libs.versions.toml"
        target.parent.mkdir(parents=True)
        target.write_text("[versions]\nold = \"0.0.1\"\n")
        install_catalog(tmp_path)
        assert "old" not in target.read_text()
