"""File collaborator — existence, deletion, writing, minification, concatenation.

Minification goes through the ``Minifier`` protocol so a real minifier can
be plugged in; the default ``LineStripMinifier`` only trims each line and
drops blank ones.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from assetmix.exceptions import MixError

logger = logging.getLogger(__name__)


class MinifyFailed(MixError):
    """Raised when a file cannot be minified in place."""


class ConcatenateFailed(MixError):
    """Raised when source files cannot be combined into their output."""


# ---------------------------------------------------------------------------
# Minifiers
# ---------------------------------------------------------------------------


@runtime_checkable
class Minifier(Protocol):
    """Protocol for minification backends.

    Any object with a ``minify(text, suffix) -> str`` method satisfies this
    protocol. ``suffix`` is the file extension, e.g. ``".js"`` or ``".css"``.
    """

    def minify(self, text: str, suffix: str) -> str:
        ...


class LineStripMinifier:
    """Strips leading and trailing whitespace from every line.

    Blank lines are dropped; line breaks are kept so that statements relying
    on automatic semicolon insertion still parse.
    """

    def minify(self, text: str, suffix: str) -> str:
        lines = (line.strip() for line in text.splitlines())
        return "\n".join(line for line in lines if line)


# ---------------------------------------------------------------------------
# File
# ---------------------------------------------------------------------------


class File:
    """A single file on disk.

    Parameters
    ----------
    path:
        Location of the file.
    minifier:
        Backend used by ``minify``. Defaults to ``LineStripMinifier``.
    """

    def __init__(self, path: Path, minifier: Minifier | None = None) -> None:
        self.path = Path(path)
        self._minifier = minifier or LineStripMinifier()

    @staticmethod
    def exists_at(path: Path) -> bool:
        return Path(path).exists()

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def write(self, text: str) -> File:
        """Write ``text`` to the file, creating parent directories."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding="utf-8")
        return self

    def delete(self) -> File:
        """Remove the file. A missing file is not an error."""
        self.path.unlink(missing_ok=True)
        return self

    def minify(self) -> File:
        """Rewrite the file in place with its minified contents.

        Raises
        ------
        MinifyFailed
            If the file cannot be read or rewritten.
        """
        try:
            text = self.read()
            self.path.write_text(
                self._minifier.minify(text, self.path.suffix), encoding="utf-8"
            )
        except (OSError, UnicodeDecodeError) as exc:
            raise MinifyFailed(f"Could not minify {self.path}: {exc}") from exc
        logger.debug("Minified %s", self.path)
        return self


def concatenate(sources: list[Path], output: Path) -> Path:
    """Join ``sources`` line-wise, in order, into ``output``.

    Raises
    ------
    ConcatenateFailed
        If any source is missing or the output cannot be written.
    """
    output = Path(output)
    parts: list[str] = []
    try:
        for source in sources:
            parts.append(Path(source).read_text(encoding="utf-8").rstrip("\n"))
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text("\n".join(parts) + "\n", encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConcatenateFailed(f"Could not combine into {output}: {exc}") from exc
    logger.debug("Combined %d file(s) into %s", len(parts), output)
    return output
