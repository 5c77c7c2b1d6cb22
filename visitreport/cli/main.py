#!/usr/bin/env python
"""Command line interface for visitreport."""

from typing import Optional

import typer
from rich.console import Console

from visitreport.cli.commands import note, photo, report, visit
from visitreport.cli.utils import state

app = typer.Typer(help="Record college visits and generate visit reports")
console = Console()

# Add command groups
app.add_typer(visit.app, name="visit")
app.add_typer(note.app, name="note")
app.add_typer(photo.app, name="photo")
app.add_typer(report.app, name="report")


@app.callback()
def callback(
    store: Optional[str] = typer.Option(
        None,
        envvar="VISITREPORT_STORE",
        help="Path of the JSON record store (default: ~/.config/visitreport/store.json)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs"),
):
    """Document campus visits with notes and photos and turn them into reports."""
    state.configure_logging(verbose)
    state.set_store_path(store)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
