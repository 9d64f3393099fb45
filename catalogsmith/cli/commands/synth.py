"""``catalogsmith synth MODULE:ATTR`` — synthesize an app into a cloud assembly.

``ATTR`` names either an ``App`` instance or a zero-argument callable
returning one. The assembly is written to ``--outdir`` and summarized as
a table of stacks and packaged artifacts.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from catalogsmith.constructs.app import App
from catalogsmith.core.validation import ProductValidationError

console = Console()


class AppLoadError(RuntimeError):
    """Raised when an ``MODULE:ATTR`` reference does not yield an App."""


def load_app(app_ref: str, app_dir: Path | None = None) -> App:
    """Import ``module:attr`` and return the App it names."""
    module_name, sep, attr = app_ref.partition(":")
    if not sep or not module_name or not attr:
        raise AppLoadError(f"Expected MODULE:ATTR, got {app_ref!r}")

    if app_dir is not None and str(app_dir) not in sys.path:
        sys.path.insert(0, str(app_dir))

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise AppLoadError(f"Cannot import module {module_name!r}: {exc}") from exc

    try:
        target = getattr(module, attr)
    except AttributeError as exc:
        raise AppLoadError(f"Module {module_name!r} has no attribute {attr!r}") from exc

    if not isinstance(target, App) and callable(target):
        target = target()
    if not isinstance(target, App):
        raise AppLoadError(f"{app_ref} is not an App (got {type(target).__name__})")
    return target


def synth_cmd(
    app_ref: str = typer.Argument(
        ...,
        help="The app to synthesize, as MODULE:ATTR.",
    ),
    outdir: Path = typer.Option(
        None,
        "--outdir",
        "-o",
        help="Assembly output directory (defaults to the app's outdir).",
    ),
    app_dir: Path = typer.Option(
        Path("."),
        "--app-dir",
        help="Directory added to the import path before loading the app.",
    ),
) -> None:
    """Synthesize an app and print its stacks and packaged artifacts."""
    try:
        app = load_app(app_ref, app_dir)
    except (AppLoadError, ProductValidationError) as exc:
        console.print(f"[bold red]Cannot load app:[/bold red] {exc}")
        raise typer.Exit(code=1)

    if outdir is not None:
        app.outdir = outdir

    assembly = app.synth()

    table = Table(title="Packaged Artifacts")
    table.add_column("Path", style="cyan")
    table.add_column("Fingerprint", style="green")
    table.add_column("Kind")
    table.add_column("Size", justify="right")
    table.add_column("Consumers")
    for asset in assembly.assets:
        table.add_row(
            asset.path,
            asset.id[:16],
            asset.packaging.value,
            str(asset.size_bytes),
            ", ".join(asset.consumers),
        )

    console.print()
    console.print(
        Panel(
            "\n".join([
                "[bold green]Synthesis complete![/bold green]",
                "",
                f"[bold]Output:[/bold]    {assembly.outdir}",
                f"[bold]Stacks:[/bold]    {', '.join(s.stack_name for s in assembly.stacks) or '-'}",
                f"[bold]Artifacts:[/bold] {len(assembly.assets)}",
            ]),
            title="[bold]catalogsmith[/bold]",
            border_style="green",
            padding=(1, 2),
        )
    )
    if assembly.assets:
        console.print(table)
