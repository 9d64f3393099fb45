"""catalogsmith CLI — Typer-based command-line interface.

Provides the ``catalogsmith`` command with subcommands for synthesizing
apps and fingerprinting template files.

All output uses Rich for formatted terminal display.
"""
