"""``assetmix build`` — resolve the bundler configuration for this project.

Runs the build definition, combines and (in production) minifies files, and
emits the resolved configuration as JSON for the bundler.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer

from assetmix.cli.commands._common import (
    configure_logging,
    console,
    fail_on_mix_error,
    load_settings,
)
from assetmix.core.resolver import HOT_FLAG, ConfigResolver


def build_cmd(
    hot: bool = typer.Option(
        False,
        HOT_FLAG,
        help="Enable hot reloading and write the hot marker file.",
    ),
    production: bool = typer.Option(
        False,
        "--production",
        "-P",
        help="Build for production (minify combined and listed files).",
    ),
    root: Path = typer.Option(
        None,
        "--root",
        "-r",
        help="Project root. Defaults to ASSETMIX_PROJECT_ROOT or the current directory.",
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the configuration JSON to this file instead of stdout.",
    ),
) -> None:
    """Resolve the bundler configuration and run the side pipelines."""
    settings = load_settings(root, production)
    configure_logging(settings)

    with fail_on_mix_error():
        resolver = ConfigResolver(settings, argv=[HOT_FLAG] if hot else [])
        resolver.initialize()
        config = resolver.build_config()
        resolver.run_concatenation().run_minification()

    payload = json.dumps(config, indent=2)
    if output is None:
        typer.echo(payload)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload + "\n", encoding="utf-8")
    console.print(f"[green]Wrote bundler configuration to[/green] {output}")
