"""Asset manifest — logical asset path to built (possibly hashed) path.

The manifest is a single JSON object on disk, ``<cachePath>/Mix.json`` by
default, read independently by template helpers. Every ``set`` rewrites the
whole file through a temporary sibling and an atomic rename, so a reader
never observes a partially written document.
"""

from __future__ import annotations

import contextlib
import json
import logging
from pathlib import Path
from typing import Any

from assetmix.exceptions import MixError

logger = logging.getLogger(__name__)


class ManifestCorrupt(MixError):
    """Raised when an existing manifest file is not a valid JSON object."""


class ManifestWriteFailed(MixError):
    """Raised when the manifest cannot be persisted."""


class Manifest:
    """In-memory manifest with a load/persist contract to a JSON file.

    Parameters
    ----------
    path:
        Location of the backing JSON file. May be reassigned later; a
        reassignment affects where the next ``set`` persists but does not
        reload anything on its own.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._entries: dict[str, str] = {}

    @property
    def path(self) -> Path:
        return self._path

    @path.setter
    def path(self, value: Path) -> None:
        self._path = Path(value)

    # ------------------------------------------------------------------
    # Load / persist
    # ------------------------------------------------------------------

    def load(self, path: Path | None = None) -> dict[str, str]:
        """Read the manifest from disk, replacing the in-memory entries.

        Returns an empty mapping if the file does not exist.

        Raises
        ------
        ManifestCorrupt
            If the file exists but is not a JSON object.
        """
        source = Path(path) if path is not None else self._path
        if not source.exists():
            logger.debug("No manifest at %s — starting empty.", source)
            self._entries = {}
            return {}

        try:
            raw: Any = json.loads(source.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ManifestCorrupt(f"Manifest {source} is not valid JSON: {exc}") from exc
        except OSError as exc:
            raise ManifestCorrupt(f"Manifest {source} could not be read: {exc}") from exc

        if not isinstance(raw, dict):
            raise ManifestCorrupt(
                f"Manifest {source} must contain a JSON object, got {type(raw).__name__}"
            )

        self._entries = {str(k): str(v) for k, v in raw.items()}
        logger.debug("Loaded %d manifest entries from %s.", len(self._entries), source)
        return dict(self._entries)

    def persist(self) -> None:
        """Atomically write the full mapping as pretty-printed JSON.

        Raises
        ------
        ManifestWriteFailed
            On any I/O error. The previous file, if any, is left intact.
        """
        target = self._path
        tmp = target.with_name(f".{target.name}.tmp")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(
                json.dumps(self._entries, indent=2, sort_keys=True) + "\n",
                encoding="utf-8",
            )
            tmp.replace(target)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise ManifestWriteFailed(f"Could not write manifest {target}: {exc}") from exc
        logger.debug("Persisted %d manifest entries to %s.", len(self._entries), target)

    # ------------------------------------------------------------------
    # Mapping access
    # ------------------------------------------------------------------

    def get(self, key: str) -> str | None:
        return self._entries.get(key)

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite ``key`` and persist immediately."""
        self._entries[key] = value
        self.persist()

    def as_dict(self) -> dict[str, str]:
        return dict(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
