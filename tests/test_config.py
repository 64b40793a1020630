"""Tests for verifier settings."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from catalogguard.core.config import (
    DEFAULT_LOOKAHEAD_WINDOW,
    DEFAULT_SKIP_DIRS,
    VerifierSettings,
)

_ENV_KEYS = ("CATALOGGUARD_LOOKAHEAD_WINDOW", "CATALOGGUARD_SKIP_DIRS", "CATALOGGUARD_MAX_WORKERS")


@pytest.fixture
def clean_env():
    with patch.dict(os.environ, {}, clear=False):
        for k in _ENV_KEYS:
            os.environ.pop(k, None)
        yield


class TestVerifierSettings:
    def test_defaults(self, clean_env):
        settings = VerifierSettings.from_env()
        assert settings == VerifierSettings()
        assert settings.lookahead_window == DEFAULT_LOOKAHEAD_WINDOW
        assert settings.skip_dirs == DEFAULT_SKIP_DIRS
        assert settings.suffixes == (".gradle.kts", ".gradle")

    def test_env_overrides(self, clean_env):
        env = {
            "CATALOGGUARD_LOOKAHEAD_WINDOW": "120",
            "CATALOGGUARD_SKIP_DIRS": "out, .idea ,",
            "CATALOGGUARD_MAX_WORKERS": "8",
        }
        with patch.dict(os.environ, env):
            settings = VerifierSettings.from_env()
        assert settings.lookahead_window == 120
        assert settings.skip_dirs == frozenset({"out", ".idea"})
        assert settings.max_workers == 8

    def test_empty_skip_dirs_disables_pruning(self, clean_env):
        with patch.dict(os.environ, {"CATALOGGUARD_SKIP_DIRS": ""}):
            assert VerifierSettings.from_env().skip_dirs == frozenset()

    def test_workers_floor_at_one(self, clean_env):
        with patch.dict(os.environ, {"CATALOGGUARD_MAX_WORKERS": "0"}):
            assert VerifierSettings.from_env().max_workers == 1

    def test_negative_window_rejected(self, clean_env):
        with patch.dict(os.environ, {"CATALOGGUARD_LOOKAHEAD_WINDOW": "-1"}):
            with pytest.raises(ValueError):
                VerifierSettings.from_env()
