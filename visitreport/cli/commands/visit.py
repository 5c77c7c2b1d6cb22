"""Visit commands for the visitreport CLI."""

from datetime import datetime
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from visitreport.cli.utils import state

app = typer.Typer(help="Create and manage visits")
console = Console()


@app.command("create")
def create_visit(
    college_name: str = typer.Argument(..., help="Name of the visited college"),
    visit_date: Optional[datetime] = typer.Option(
        None, "--date", formats=["%Y-%m-%d"], help="Visit date (default: today)"
    ),
    location: str = typer.Option("", help="Free-text location"),
    latitude: Optional[float] = typer.Option(None, help="GPS latitude"),
    longitude: Optional[float] = typer.Option(None, help="GPS longitude"),
):
    """Create a new draft visit."""
    store = state.load_store()
    try:
        visit = store.create_visit(
            state.current_user(),
            college_name,
            (visit_date or datetime.now()).date(),
            location=location,
            latitude=latitude,
            longitude=longitude,
        )
        state.save_store(store)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print(
        f"Created visit [bold]{visit.id}[/bold] ({escape(visit.college_name)})"
    )


@app.command("list")
def list_visits():
    """List your visits, most recent visit date first."""
    store = state.load_store()
    visits = store.list_visits(state.current_user())

    if not visits:
        console.print("No visits found")
        return

    table = Table("College", "Date", "Location", "Status", "ID")
    for visit in visits:
        table.add_row(
            escape(visit.college_name),
            visit.visit_date.isoformat(),
            escape(visit.location),
            visit.status,
            visit.id,
        )
    console.print(table)


@app.command("show")
def show_visit(visit_id: str):
    """Show a visit with its note and photo counts."""
    store = state.load_store()
    visit = store.get_visit(visit_id)
    if visit is None:
        console.print(
            f"[bold red]Error:[/bold red] Visit not found: {escape(visit_id)}"
        )
        raise typer.Exit(1)

    console.print("[bold]Visit Details:[/bold]")
    console.print(f"College: [bold]{escape(visit.college_name)}[/bold]")
    console.print(f"Date: {visit.visit_date.isoformat()}")
    console.print(f"Location: {escape(visit.location)}")
    if visit.has_coordinates:
        console.print(f"Coordinates: {visit.latitude}, {visit.longitude}")
    console.print(f"Status: {visit.status}")
    console.print(f"Notes: {len(store.list_notes(visit_id))}")
    console.print(f"Photos: {len(store.list_photos(visit_id))}")
    console.print(f"Reports: {len(store.list_reports(visit_id))}")


@app.command("complete")
def complete_visit(visit_id: str):
    """Mark a visit as completed."""
    store = state.load_store()
    try:
        store.update_visit(visit_id, status="completed")
        state.save_store(store)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print(f"Completed visit [bold]{visit_id}[/bold]")


@app.command("delete")
def delete_visit(visit_id: str):
    """Delete a visit with its notes, photos and reports."""
    store = state.load_store()
    try:
        store.delete_visit(visit_id)
        state.save_store(store)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print(f"Deleted visit [bold]{visit_id}[/bold]")
