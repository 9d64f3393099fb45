"""``catalogsmith fingerprint FILE...`` — show which template files would share an artifact."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from catalogsmith.core.deduplicator import AssetDeduplicator
from catalogsmith.models.artifacts import AssetPackaging, TemplateDocument

console = Console()


def fingerprint_cmd(
    files: list[Path] = typer.Argument(
        ...,
        help="Template files to fingerprint.",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
) -> None:
    """Fingerprint template files and group byte-identical ones."""
    dedup = AssetDeduplicator()

    table = Table(title="Template Fingerprints")
    table.add_column("File", style="cyan")
    table.add_column("Fingerprint", style="green")
    table.add_column("Shares artifact with")

    for path in files:
        ref = dedup.resolve(
            TemplateDocument(
                content=path.read_bytes(),
                origin=str(path),
                extension=path.suffix,
                packaging=AssetPackaging.FILE,
            )
        )
        shared = "" if ref.origin == str(path) else ref.origin
        table.add_row(str(path), ref.fingerprint, shared)

    console.print(table)
    console.print(
        f"[bold]{len(files)}[/bold] file(s), "
        f"[bold]{len(dedup)}[/bold] unique artifact(s)."
    )
