"""Content hashing helpers for cache-busting filenames.

Digests are SHA-256 over the raw file bytes, hex encoded and truncated to a
fixed length, so identical content always yields an identical filename.
"""

from __future__ import annotations

import hashlib
import posixpath
from pathlib import Path

HASH_LENGTH = 20
HASH_PLACEHOLDER = "[hash]"

_CHUNK_SIZE = 65536


def sha256_hex(data: bytes) -> str:
    """Return the SHA-256 hex digest of raw bytes."""
    return hashlib.sha256(data).hexdigest()


def digest_of(path: Path) -> str:
    """Return the truncated content digest of the file at ``path``.

    Raises ``FileNotFoundError`` if the file does not exist.
    """
    h = hashlib.sha256()
    with Path(path).open("rb") as f:
        while True:
            chunk = f.read(_CHUNK_SIZE)
            if not chunk:
                break
            h.update(chunk)
    return h.hexdigest()[:HASH_LENGTH]


def logical_name(destination: str) -> str:
    """Strip a ``[hash]`` placeholder segment from a destination path.

    ``css/app.[hash].css`` -> ``css/app.css``
    """
    return destination.replace(f".{HASH_PLACEHOLDER}", "").replace(HASH_PLACEHOLDER, "")


def hashed_filename(destination: str, digest: str) -> str:
    """Insert ``digest`` into the filename of ``destination``.

    A ``[hash]`` placeholder is replaced in place; otherwise the digest goes
    just before the extension (``js/app.js`` -> ``js/app.<digest>.js``).
    """
    if HASH_PLACEHOLDER in destination:
        return destination.replace(HASH_PLACEHOLDER, digest)
    head, tail = posixpath.split(destination)
    stem, ext = posixpath.splitext(tail)
    return posixpath.join(head, f"{stem}.{digest}{ext}")
