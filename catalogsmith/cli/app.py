"""Main Typer application — imports and registers all CLI commands.

Entry point: ``catalogsmith`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer

from catalogsmith.cli.commands.fingerprint import fingerprint_cmd
from catalogsmith.cli.commands.synth import synth_cmd
from catalogsmith.config import config

app = typer.Typer(
    name="catalogsmith",
    help="catalogsmith: Service Catalog product synthesis with deduplicated templates.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="synth", help="Synthesize an app into a cloud assembly.")(synth_cmd)
app.command(name="fingerprint", help="Fingerprint template files and group duplicates.")(fingerprint_cmd)


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app()


if __name__ == "__main__":
    main()
