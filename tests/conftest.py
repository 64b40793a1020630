"""Shared pytest fixtures for catalogguard tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import structlog


def configure_test_structlog() -> None:
    """Route structlog through stdlib logging, uncached, so caplog sees engine events."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


@pytest.fixture(autouse=True, scope="session")
def _stdlib_structlog():
    configure_test_structlog()
    yield
    structlog.reset_defaults()


@pytest.fixture
def write_build(tmp_path):
    """Write a build file under tmp_path and return its path."""

    def _write(rel: str, text: str) -> Path:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
        return path

    return _write
