"""Configuration resolver — the central coordinator for one build pass.

The ConfigResolver wires together the PathResolver, BuildDirectiveRegistry,
Manifest and Versioning policy, runs the user's build definition, and
resolves the directives into the bundler configuration: entry map, output
descriptor, and any raw user overrides merged on top.

It also drives the side pipelines that run outside the bundler:
concatenation, minification, and the hot-reload marker file.
"""

from __future__ import annotations

import json
import logging
import posixpath
import re
import sys
from collections.abc import Callable, Iterable, MutableMapping, Sequence
from pathlib import Path
from typing import Any

from assetmix.config import MixSettings
from assetmix.core.files import File, Minifier, concatenate
from assetmix.core.manifest import Manifest
from assetmix.core.merge import merge_config
from assetmix.core.paths import PathResolver
from assetmix.core.registry import BuildDirectiveRegistry, MixApi
from assetmix.core.script import load_mix_file
from assetmix.core.versioning import Versioning
from assetmix.exceptions import MixError
from assetmix.models.config import ModeFlags, OutputConfig
from assetmix.models.directives import CombineDirective, ScriptDirective

logger = logging.getLogger(__name__)

HOT_FLAG = "--hot"
HOT_MARKER_TEXT = "hot reloading enabled"
BABELRC = ".babelrc"

DEFAULT_BABEL_OPTIONS: dict[str, Any] = {
    "cacheDirectory": True,
    "presets": [["es2015", {"modules": False}]],
}


class NoEntryDefined(MixError):
    """Raised when entry or output is resolved before any script bundle exists."""


class NoStyleDefined(MixError):
    """Raised when the CSS output is resolved without an active preprocessor."""


class ConfigResolver:
    """Resolves build directives into a bundler configuration.

    One resolver serves one build pass. Construct a fresh one per pass; no
    state is shared between instances.

    Parameters
    ----------
    settings:
        Build settings. Uses defaults (and ASSETMIX_* env vars) if not provided.
    root:
        Project root. Defaults to ``settings.project_root``.
    argv:
        Process arguments inspected for ``--hot``. Defaults to ``sys.argv``.
    minifier:
        Backend for in-place minification. Defaults to the line-strip minifier.
    """

    def __init__(
        self,
        settings: MixSettings | None = None,
        *,
        root: Path | None = None,
        argv: Sequence[str] | None = None,
        minifier: Minifier | None = None,
    ) -> None:
        self.settings = settings or MixSettings()
        self.paths = PathResolver(self.settings, root)
        self.registry = BuildDirectiveRegistry()
        self.api = MixApi(self.registry)

        # Mode flags
        self.hmr = False
        self.in_production = self.settings.is_production
        self._argv = list(sys.argv if argv is None else argv)
        self._minifier = minifier

        # Manifest and versioning
        self.manifest = Manifest(self.manifest_path)
        self.versioning = Versioning(self.manifest, root=self.paths.project_root)

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    @property
    def public_path(self) -> str:
        """Public base path, as overridden by the build definition if it did."""
        return self.registry.public_path or self.paths.base_public_path()

    @property
    def cache_path(self) -> str:
        """Cache base path, as overridden by the build definition if it did."""
        return self.registry.cache_path or self.paths.base_cache_path()

    @property
    def manifest_path(self) -> Path:
        return self.paths.root(self.cache_path, self.settings.manifest_name)

    @property
    def hot_file_path(self) -> Path:
        return self.paths.root(self.cache_path, self.settings.hot_file_name)

    @property
    def mode_flags(self) -> ModeFlags:
        return ModeFlags(
            hmr=self.hmr,
            in_production=self.in_production,
            sourcemaps=self.registry.sourcemaps,
            notifications=self.registry.notifications,
            versioning=self.versioning.enabled,
            css_preprocessor=self.registry.css_preprocessor,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(
        self,
        definition: Callable[[MixApi], Any] | None = None,
        *,
        detect_hot: bool = True,
    ) -> ModeFlags:
        """Run the build definition and settle the mode flags.

        ``definition`` is called with the registration handle; without one
        the project's build-definition script is executed instead. The
        manifest is then loaded from the (possibly overridden) cache path and
        hot-reload detection runs unless ``detect_hot`` is False, which
        leaves any existing marker untouched.
        """
        if definition is None:
            load_mix_file(self.paths.mix_file(), self.api)
        else:
            definition(self.api)

        # The build definition may have moved the cache path.
        self.manifest.path = self.manifest_path
        self.manifest.load()
        self.versioning.manifest = self.manifest
        self.versioning.enabled = self.registry.versioning

        if detect_hot:
            self.detect_hot_reload()

        flags = self.mode_flags
        logger.info(
            "Initialized build: %d script bundle(s), production=%s, hot=%s, versioning=%s",
            len(self.registry.scripts),
            flags.in_production,
            flags.hmr,
            flags.versioning,
        )
        return flags

    def detect_hot_reload(self, argv: Sequence[str] | None = None) -> bool:
        """Sync the hot-reload marker file with the ``--hot`` flag.

        Any existing marker is deleted first. If ``--hot`` is present, the
        hot-reload flag is set and a fresh marker is written; external
        integrations switch asset URLs on the marker's existence alone.
        """
        args = self._argv if argv is None else list(argv)
        marker = File(self.hot_file_path)
        marker.delete()

        self.hmr = HOT_FLAG in args
        if self.hmr:
            marker.write(HOT_MARKER_TEXT)
            logger.info("Hot reloading enabled; marker written to %s", marker.path)
        return self.hmr

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _require_scripts(self) -> list[ScriptDirective]:
        if not self.registry.scripts:
            raise NoEntryDefined(
                "No script bundle defined. Call mix.js() in the build definition."
            )
        return self.registry.scripts

    def _strip_public_path(self, path: str) -> str:
        public = posixpath.normpath(self.public_path)
        if public == ".":
            return re.sub(r"^\./", "", path)
        return re.sub(rf"^(\./)?{re.escape(public)}/", "", path, count=1)

    def resolve_entry(self) -> dict[str, list[str]]:
        """Map each script bundle name to its ordered entry sources.

        An active preprocessor's source is appended to the first declared
        bundle, whichever it is, so its stylesheet is extracted from there.
        """
        scripts = self._require_scripts()
        entry = {s.output.name: list(s.entry) for s in scripts}

        style = self.registry.active_style
        if style is not None:
            first = next(iter(entry))
            entry[first].append(style.src)
            logger.debug("Attached %s to the first bundle '%s'.", style.src, first)

        return entry

    def resolve_output(self) -> OutputConfig:
        """Return the bundler output descriptor."""
        scripts = self._require_scripts()
        pattern = "[name].[hash].js" if self.versioning.enabled else "[name].js"
        filename = posixpath.normpath(posixpath.join(scripts[0].output.base, pattern))

        return OutputConfig(
            path="/" if self.hmr else self.public_path,
            filename=self._strip_public_path(filename),
            public_path=self.settings.dev_server_url if self.hmr else "./",
        )

    def resolve_css_output(self) -> str:
        """Return the extracted stylesheet path relative to the public path."""
        style = self.registry.active_style
        if style is None:
            raise NoStyleDefined("No style preprocessor is active.")
        path = style.output.hashed_path if self.versioning.enabled else style.output.path
        return self._strip_public_path(path)

    def resolve_transpiler_options(self) -> str:
        """Return the transpiler loader query string.

        A ``.babelrc`` at the project root is picked up by the transpiler on
        its own, so only the cache directory is requested in that case.
        """
        if File.exists_at(self.paths.root(BABELRC)):
            return "?cacheDirectory"
        return "?" + json.dumps(DEFAULT_BABEL_OPTIONS, separators=(",", ":"))

    def finalize(self, base_config: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
        """Merge the user's raw overrides into ``base_config`` in place."""
        override = self.registry.webpack_config
        if not override:
            return base_config
        return merge_config(base_config, override)

    def build_config(self) -> dict[str, Any]:
        """Resolve the complete bundler configuration for this pass."""
        config: dict[str, Any] = {
            "entry": self.resolve_entry(),
            "output": self.resolve_output().model_dump(by_alias=True),
        }
        self.finalize(config)
        return config

    # ------------------------------------------------------------------
    # Side pipelines
    # ------------------------------------------------------------------

    def run_minification(self, files: Iterable[str] | None = None) -> ConfigResolver:
        """Minify ``files`` (or the registered minify list) in production."""
        if not self.in_production:
            return self

        targets = list(self.registry.minify if files is None else files)
        for target in targets:
            File(self.paths.root(target), self._minifier).minify()
        if targets:
            logger.info("Minified %d file(s).", len(targets))
        return self

    def run_concatenation(
        self, files: Iterable[CombineDirective] | None = None
    ) -> ConfigResolver:
        """Combine each directive's sources into its output, in order.

        In production the combined output is minified as well.
        """
        directives = list(self.registry.combine if files is None else files)
        for directive in directives:
            output = concatenate(
                [self.paths.root(src) for src in directive.src],
                self.paths.root(directive.output),
            )
            if self.in_production:
                File(output, self._minifier).minify()
        if directives:
            logger.info("Combined %d output file(s).", len(directives))
        return self

    def version_asset(self, source: str, destination: str | None = None) -> str:
        """Record the hashed path of an emitted file in the manifest.

        ``destination`` defaults to ``source``. Identity when versioning is off.
        """
        return self.versioning.hash(source, destination or source)
