"""``assetmix manifest`` — show the asset manifest for this project."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from assetmix.cli.commands._common import configure_logging, fail_on_mix_error, load_settings
from assetmix.core.resolver import ConfigResolver


def manifest_cmd(
    root: Path = typer.Option(
        None,
        "--root",
        "-r",
        help="Project root. Defaults to ASSETMIX_PROJECT_ROOT or the current directory.",
    ),
) -> None:
    """List logical asset paths and the built files they resolve to.

    The build definition runs first, so a cache path it overrides is
    honoured. The hot-reload marker is left untouched.
    """
    settings = load_settings(root)
    configure_logging(settings)

    with fail_on_mix_error():
        resolver = ConfigResolver(settings, argv=[])
        resolver.initialize(detect_hot=False)

    entries = resolver.manifest.as_dict()
    console = Console()
    if not entries:
        console.print(f"[dim]No manifest entries at {resolver.manifest.path}.[/dim]")
        return

    table = Table(title=str(resolver.manifest.path))
    table.add_column("Asset", style="cyan")
    table.add_column("Resolved path", style="green")
    for key in sorted(entries):
        table.add_row(key, entries[key])
    console.print(table)
