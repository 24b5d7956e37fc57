"""``assetmix version SOURCE`` — record the hashed path of an emitted file.

Meant to run after the bundler: hashes the emitted file's content and writes
the versioned path into the manifest so template helpers resolve it.
"""

from __future__ import annotations

from pathlib import Path

import typer

from assetmix.cli.commands._common import (
    configure_logging,
    console,
    fail_on_mix_error,
    load_settings,
)
from assetmix.core.resolver import ConfigResolver


def version_cmd(
    source: str = typer.Argument(..., help="Emitted file, relative to the project root."),
    destination: str = typer.Option(
        None,
        "--as",
        help="Logical asset path to record. Defaults to SOURCE.",
    ),
    root: Path = typer.Option(
        None,
        "--root",
        "-r",
        help="Project root. Defaults to ASSETMIX_PROJECT_ROOT or the current directory.",
    ),
) -> None:
    """Hash SOURCE and record it in the manifest (requires mix.version())."""
    settings = load_settings(root)
    configure_logging(settings)

    with fail_on_mix_error():
        resolver = ConfigResolver(settings, argv=[])
        resolver.initialize(detect_hot=False)
        if not resolver.versioning.enabled:
            console.print("[yellow]Versioning is not enabled; nothing recorded.[/yellow]")
            return
        try:
            hashed = resolver.version_asset(source, destination)
        except FileNotFoundError as exc:
            console.print(f"[bold red]File not found:[/bold red] {exc.filename or source}")
            raise typer.Exit(code=1) from exc

    typer.echo(hashed)
