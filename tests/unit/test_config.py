"""Tests for MixSettings — env-driven build settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from assetmix.config import MixSettings


class TestMixSettings:
    def test_defaults(self):
        config = MixSettings(_env_file=None)
        assert config.environment == "development"
        assert config.log_level == "INFO"
        assert config.mix_file == "webpack.mix.py"
        assert config.manifest_name == "Mix.json"
        assert config.dev_server_url == "http://localhost:8080/"

    def test_is_production_false_by_default(self):
        assert MixSettings(_env_file=None).is_production is False

    def test_is_production_when_set(self):
        assert MixSettings(_env_file=None, environment="production").is_production is True

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ASSETMIX_ENVIRONMENT", "production")
        monkeypatch.setenv("ASSETMIX_PROJECT_ROOT", "/srv/app")
        config = MixSettings(_env_file=None)
        assert config.is_production is True
        assert config.project_root == Path("/srv/app")
