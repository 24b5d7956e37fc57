"""Content-hash versioning policy over the asset manifest."""

from __future__ import annotations

import logging
from pathlib import Path

from assetmix.core.hasher import digest_of, hashed_filename, logical_name
from assetmix.core.manifest import Manifest

logger = logging.getLogger(__name__)


class Versioning:
    """Decides whether filenames are hashed and records the results.

    Holds a reference to the orchestrator's ``Manifest``; the orchestrator
    may rebind ``manifest`` after the build-definition script changes the
    cache path.

    Parameters
    ----------
    manifest:
        The manifest that receives hashed paths.
    enabled:
        True only when the build definition called ``version()``.
    root:
        Directory relative source paths are read from.
    """

    def __init__(
        self,
        manifest: Manifest,
        *,
        enabled: bool = False,
        root: Path = Path("."),
    ) -> None:
        self.manifest = manifest
        self.enabled = enabled
        self._root = Path(root)

    def hash(self, source: str, destination: str) -> str:
        """Return the hashed form of ``destination`` for the bytes at ``source``.

        When versioning is disabled this is the identity and the manifest is
        left untouched. Otherwise the manifest entry for the logical
        destination is overwritten with the hashed path.
        """
        if not self.enabled:
            return destination

        digest = digest_of(self._root / source)
        hashed = hashed_filename(destination, digest)
        key = logical_name(destination)
        self.manifest.set(key, hashed)
        logger.debug("Versioned %s -> %s", key, hashed)
        return hashed
