"""Report commands for the visitreport CLI."""

import os
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from visitreport.cli.utils import state
from visitreport.cli.utils.display import print_blocks
from visitreport.services.reports.models import VisitBundle
from visitreport.services.reports.rendering.composer import compose_report
from visitreport.services.reports.rendering.debug_tools import map_lines

app = typer.Typer(help="Generate, view and export visit reports")
console = Console()


@app.command("generate")
def generate_report(visit_id: str):
    """Generate a new report from the visit's current notes and photos."""
    store = state.load_store()
    service = state.get_service(store)
    try:
        report = service.generate(visit_id)
        state.save_store(store)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print(f"Generated report [bold]{report.id}[/bold]")


@app.command("show")
def show_report(visit_id: str):
    """Display the latest report of a visit."""
    store = state.load_store()
    service = state.get_service(store)
    try:
        report = service.latest(visit_id)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if report is None:
        console.print("No report generated yet")
        return

    print_blocks(console, service.render(report))
    console.print(
        f"[dim]Report generated on {report.created_at:%B %d, %Y %H:%M}[/dim]"
    )


@app.command("export")
def export_report(
    visit_id: str,
    output_dir: str = typer.Option(".", help="Directory to write the report to"),
    fmt: str = typer.Option("md", "--format", help="Export format: md or html"),
):
    """Export the latest report of a visit to a file."""
    store = state.load_store()
    service = state.get_service(store)
    try:
        path = service.export(visit_id, output_dir, fmt=fmt)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print(f"Exported to [bold]{path}[/bold]")


@app.command("lines")
def report_lines(visit_id: str):
    """Show how each line of the latest report is classified."""
    store = state.load_store()
    service = state.get_service(store)
    try:
        report = service.latest(visit_id)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if report is None:
        console.print("No report generated yet")
        return

    table = Table("#", "Rule", "Line")
    for row in map_lines(report.report_content):
        table.add_row(
            str(row["index"]), str(row["rule"]), escape(str(row["text"]))
        )
    console.print(table)


@app.command("compose")
def compose_from_bundle(
    bundle_path: str = typer.Argument(
        ..., help="JSON file with 'visit', 'notes' and 'photos'"
    ),
    output: Optional[str] = typer.Option(
        None, help="Write the report to this file instead of printing it"
    ),
):
    """Compose a report offline from a JSON bundle without touching the store."""
    try:
        with open(bundle_path, "r", encoding="utf-8") as f:
            bundle = VisitBundle.model_validate_json(f.read())
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    text = compose_report(bundle.visit, bundle.notes, bundle.photos)
    if output:
        directory = os.path.dirname(output)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(output, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        console.print(f"Wrote [bold]{output}[/bold]")
        return
    console.print(text, markup=False, highlight=False, soft_wrap=True)
