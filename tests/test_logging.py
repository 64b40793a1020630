"""Tests for logging setup."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest
import structlog

from catalogguard.core.logging import setup_logging
from tests.conftest import configure_test_structlog


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    pkg_level = logging.getLogger("catalogguard").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("catalogguard").setLevel(pkg_level)
    configure_test_structlog()


class TestSetupLogging:
    def test_env_level(self, restore_logging):
        with patch.dict(os.environ, {"CATALOGGUARD_LOG_LEVEL": "warning"}):
            setup_logging()
        assert logging.getLogger("catalogguard").level == logging.WARNING
        assert structlog.is_configured()

    def test_explicit_arguments_win(self, restore_logging):
        with patch.dict(os.environ, {"CATALOGGUARD_LOG_LEVEL": "ERROR", "CATALOGGUARD_LOG_FORMAT": "console"}):
            setup_logging(level="debug", fmt="json")
        assert logging.getLogger("catalogguard").level == logging.DEBUG
        handler = logging.getLogger().handlers[-1]
        assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
        assert isinstance(handler.formatter.processors[-1], structlog.processors.JSONRenderer)
