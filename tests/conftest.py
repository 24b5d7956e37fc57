"""Shared test fixtures for assetmix."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from assetmix.config import MixSettings
from assetmix.core.manifest import Manifest
from assetmix.core.resolver import ConfigResolver


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Provide an empty project root."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def framework_project(project: Path) -> Path:
    """Provide a project root carrying the framework sentinel file."""
    (project / "artisan").write_text("#!/usr/bin/env php\n", encoding="utf-8")
    return project


@pytest.fixture
def make_settings(project: Path) -> Callable[..., MixSettings]:
    """Factory fixture: settings rooted at the test project, ignoring .env files."""

    def _factory(**overrides: Any) -> MixSettings:
        values: dict[str, Any] = {"project_root": project, "environment": "development"}
        values.update(overrides)
        return MixSettings(_env_file=None, **values)

    return _factory


@pytest.fixture
def make_resolver(make_settings: Callable[..., MixSettings]) -> Callable[..., ConfigResolver]:
    """Factory fixture: a ConfigResolver for the test project, no --hot by default."""

    def _factory(argv: list[str] | None = None, **settings: Any) -> ConfigResolver:
        return ConfigResolver(make_settings(**settings), argv=argv or [])

    return _factory


@pytest.fixture
def manifest(tmp_path: Path) -> Manifest:
    """Provide a Manifest backed by a temp file that does not exist yet."""
    return Manifest(tmp_path / "cache" / "Mix.json")


@pytest.fixture
def write_file() -> Callable[[Path, str, str], Path]:
    """Factory fixture: write text under a root directory and return the path."""

    def _write(root: Path, relative: str, text: str) -> Path:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
