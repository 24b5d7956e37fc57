"""assetmix CLI — Typer-based command-line interface.

Provides the ``assetmix`` command with subcommands for resolving the bundler
configuration, recording versioned assets, and inspecting the manifest.

All human-facing output uses Rich; the resolved configuration is printed as
plain JSON so it can be piped into the bundler.
"""
