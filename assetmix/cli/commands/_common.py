"""Shared CLI helpers: settings, logging, and error reporting."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from assetmix.config import MixSettings
from assetmix.exceptions import MixError

console = Console(stderr=True)
logger = logging.getLogger("assetmix")


def load_settings(root: Path | None = None, production: bool = False) -> MixSettings:
    """Read settings from the environment, applying CLI overrides."""
    overrides: dict[str, object] = {}
    if root is not None:
        overrides["project_root"] = root
    if production:
        overrides["environment"] = "production"
    return MixSettings(**overrides)


def configure_logging(settings: MixSettings) -> None:
    """Route assetmix logs through a Rich handler at the configured level."""
    if any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.setLevel(settings.log_level.upper())
        return
    handler = RichHandler(console=console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(settings.log_level.upper())
    logger.propagate = False


@contextmanager
def fail_on_mix_error() -> Iterator[None]:
    """Turn a failed build pass into a red message and exit code 1."""
    try:
        yield
    except MixError as exc:
        logger.critical("Build aborted: %s", exc)
        console.print(f"[bold red]{type(exc).__name__}:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc
