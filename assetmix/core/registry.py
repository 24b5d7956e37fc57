"""Build directive registry and the registration handle given to build scripts.

The build-definition script never touches the registry directly. It receives
a ``MixApi`` handle and declares bundles through it::

    mix.js("resources/assets/js/app.js", "public/js") \
       .sass("resources/assets/sass/app.scss", "public/css") \
       .version()
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import PurePosixPath
from typing import Any

from assetmix.core.hasher import HASH_PLACEHOLDER
from assetmix.models.directives import (
    CombineDirective,
    Preprocessor,
    ScriptDirective,
    ScriptOutput,
    StyleDirective,
    StyleOutput,
)

logger = logging.getLogger(__name__)


def _as_list(paths: str | Iterable[str]) -> list[str]:
    if isinstance(paths, str):
        return [paths]
    return [str(p) for p in paths]


class BuildDirectiveRegistry:
    """Accumulates directives and mode flags ahead of resolution."""

    def __init__(self) -> None:
        self.scripts: list[ScriptDirective] = []
        self.styles: dict[Preprocessor, StyleDirective] = {}
        self.combine: list[CombineDirective] = []
        self.minify: list[str] = []

        self.css_preprocessor: Preprocessor | None = None
        self.sourcemaps = False
        self.notifications = True
        self.versioning = False

        self.public_path: str | None = None
        self.cache_path: str | None = None
        self.webpack_config: dict[str, Any] | None = None

    @property
    def active_style(self) -> StyleDirective | None:
        if self.css_preprocessor is None:
            return None
        return self.styles[self.css_preprocessor]

    def add_script(self, directive: ScriptDirective) -> None:
        self.scripts.append(directive)
        logger.debug("Registered script bundle '%s'.", directive.output.name)

    def add_style(self, directive: StyleDirective) -> None:
        if self.css_preprocessor and self.css_preprocessor != directive.preprocessor:
            logger.warning(
                "Style preprocessor %s replaces %s; only one stylesheet is extracted.",
                directive.preprocessor.value,
                self.css_preprocessor.value,
            )
        self.styles[directive.preprocessor] = directive
        self.css_preprocessor = directive.preprocessor
        logger.debug("Registered %s stylesheet %s.", directive.preprocessor.value, directive.src)


class MixApi:
    """Directive-registration handle passed to the build-definition script.

    Every method returns the handle so calls can be chained.
    """

    def __init__(self, registry: BuildDirectiveRegistry) -> None:
        self._registry = registry

    # ------------------------------------------------------------------
    # Bundles
    # ------------------------------------------------------------------

    def js(self, entry: str | Iterable[str], output: str) -> MixApi:
        """Compile ``entry`` sources into one script bundle.

        ``output`` is either a file (``public/js/app.js``) or a directory
        (``public/js``), in which case the bundle is named after the first
        entry.
        """
        entries = _as_list(entry)
        if not entries:
            raise ValueError("mix.js() requires at least one entry file.")
        out = PurePosixPath(output)
        if out.suffix:
            script_output = ScriptOutput(name=out.stem, base=str(out.parent))
        else:
            script_output = ScriptOutput(name=PurePosixPath(entries[0]).stem, base=str(out))
        self._registry.add_script(ScriptDirective(entry=entries, output=script_output))
        return self

    def sass(self, src: str, output: str) -> MixApi:
        return self._style(Preprocessor.SASS, src, output)

    def less(self, src: str, output: str) -> MixApi:
        return self._style(Preprocessor.LESS, src, output)

    def _style(self, preprocessor: Preprocessor, src: str, output: str) -> MixApi:
        out = PurePosixPath(output)
        if not out.suffix:
            out = out / f"{PurePosixPath(src).stem}.css"
        hashed = out.with_name(f"{out.stem}.{HASH_PLACEHOLDER}{out.suffix}")
        self._registry.add_style(
            StyleDirective(
                preprocessor=preprocessor,
                src=src,
                output=StyleOutput(path=str(out), hashed_path=str(hashed)),
            )
        )
        return self

    def combine(self, src: str | Iterable[str], output: str) -> MixApi:
        """Concatenate ``src`` files, in order, into ``output``."""
        self._registry.combine.append(CombineDirective(src=_as_list(src), output=output))
        return self

    def minify(self, src: str | Iterable[str]) -> MixApi:
        """Minify files in place when building for production."""
        self._registry.minify.extend(_as_list(src))
        return self

    # ------------------------------------------------------------------
    # Mode flags and paths
    # ------------------------------------------------------------------

    def source_maps(self) -> MixApi:
        self._registry.sourcemaps = True
        return self

    def version(self) -> MixApi:
        """Enable content-hash versioning of emitted files."""
        self._registry.versioning = True
        return self

    def disable_notifications(self) -> MixApi:
        self._registry.notifications = False
        return self

    def set_public_path(self, path: str) -> MixApi:
        self._registry.public_path = path
        return self

    def set_cache_path(self, path: str) -> MixApi:
        self._registry.cache_path = path
        return self

    def webpack_config(self, config: dict[str, Any]) -> MixApi:
        """Supply raw bundler options merged over the resolved configuration.

        A later call replaces an earlier one.
        """
        self._registry.webpack_config = config
        return self
