"""Project path resolution — public and cache base paths.

A project that carries the framework sentinel file (``artisan`` by default)
at its root keeps public assets under ``public/`` and cache data, including
the manifest and the hot-reload marker, under ``storage/framework/cache``.
Any other project uses the project root for both.
"""

from __future__ import annotations

import logging
from pathlib import Path

from assetmix.config import MixSettings

logger = logging.getLogger(__name__)

_DEFAULT_BASE = "./"


class PathResolver:
    """Resolves base paths for a single project root.

    The sentinel check runs at most once per resolver so that every path
    computed during one build pass agrees, even if the file system changes
    mid-pass.

    Parameters
    ----------
    settings:
        Active build settings. Uses defaults if not provided.
    root:
        Project root. Defaults to ``settings.project_root``.
    """

    def __init__(
        self,
        settings: MixSettings | None = None,
        root: Path | None = None,
    ) -> None:
        self._settings = settings or MixSettings()
        self._root = Path(root if root is not None else self._settings.project_root)
        self._is_framework: bool | None = None

    @property
    def project_root(self) -> Path:
        return self._root

    @property
    def is_framework_project(self) -> bool:
        """Whether the sentinel file exists at the project root (cached)."""
        if self._is_framework is None:
            self._is_framework = (self._root / self._settings.sentinel_file).is_file()
            logger.debug(
                "Framework sentinel %s %s.",
                self._settings.sentinel_file,
                "found" if self._is_framework else "not found",
            )
        return self._is_framework

    def base_public_path(self) -> str:
        """Return the directory the bundler writes public assets into."""
        if self.is_framework_project:
            return self._settings.framework_public_path
        return _DEFAULT_BASE

    def base_cache_path(self) -> str:
        """Return the directory holding the manifest and hot-reload marker."""
        if self.is_framework_project:
            return self._settings.framework_cache_path
        return _DEFAULT_BASE

    def root(self, *parts: str) -> Path:
        """Return a path under the project root."""
        return self._root.joinpath(*parts)

    def mix_file(self) -> Path:
        """Return the location of the build-definition script."""
        return self.root(self._settings.mix_file)
