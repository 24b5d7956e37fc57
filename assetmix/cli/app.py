"""Main Typer application — imports and registers all CLI commands.

Entry point: ``assetmix`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

from pathlib import Path

import typer

from assetmix.cli.commands._common import configure_logging, fail_on_mix_error, load_settings
from assetmix.cli.commands.build import build_cmd
from assetmix.cli.commands.manifest_cmd import manifest_cmd
from assetmix.cli.commands.version_cmd import version_cmd

app = typer.Typer(
    name="assetmix",
    help="assetmix: resolve front-end asset builds into a bundler configuration.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="build", help="Resolve the bundler configuration.")(build_cmd)
app.command(name="manifest", help="Show the asset manifest.")(manifest_cmd)
app.command(name="version", help="Record a versioned asset in the manifest.")(version_cmd)


@app.command(name="babel", help="Print the transpiler loader options.")
def babel_cmd(
    root: Path = typer.Option(
        None, "--root", "-r", help="Project root."
    ),
) -> None:
    """Print the transpiler options the bundler's loader should use."""
    from assetmix.core.resolver import ConfigResolver

    settings = load_settings(root)
    configure_logging(settings)
    with fail_on_mix_error():
        resolver = ConfigResolver(settings, argv=[])
    typer.echo(resolver.resolve_transpiler_options())


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
