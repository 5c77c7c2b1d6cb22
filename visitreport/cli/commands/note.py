"""Note commands for the visitreport CLI."""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from visitreport.cli.utils import state
from visitreport.services.reports.domain import (
    DEFAULT_CATEGORY,
    Category,
    category_choices,
)

app = typer.Typer(help="Record categorized notes")
console = Console()


def _check_category(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if Category.parse(value) is None:
        choices = ", ".join(tag for tag, _ in category_choices())
        raise typer.BadParameter(f"Unknown category '{value}'. Choose from: {choices}")
    return value.strip().lower()


@app.command("add")
def add_note(
    visit_id: str,
    content: str,
    category: str = typer.Option(
        DEFAULT_CATEGORY.value, callback=_check_category, help="Note category"
    ),
):
    """Add a note to a visit."""
    store = state.load_store()
    try:
        note = store.add_note(visit_id, content, category)
        state.save_store(store)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)
    label = escape(note.category_label)
    console.print(f"Added {label} note [bold]{note.id}[/bold]")


@app.command("edit")
def edit_note(
    note_id: str,
    content: Optional[str] = typer.Option(None, help="New note content"),
    category: Optional[str] = typer.Option(
        None, callback=_check_category, help="New note category"
    ),
):
    """Edit a note in place."""
    if content is None and category is None:
        console.print("[yellow]Warning:[/yellow] No updates specified")
        return

    store = state.load_store()
    try:
        store.update_note(note_id, content=content, category=category)
        state.save_store(store)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print(f"Updated note [bold]{note_id}[/bold]")


@app.command("list")
def list_notes(visit_id: str):
    """List a visit's notes, newest first."""
    store = state.load_store()
    notes = store.list_notes(visit_id)

    if not notes:
        console.print("No notes found")
        return

    table = Table("Category", "Content", "ID")
    for note in notes:
        table.add_row(escape(note.category_label), escape(note.content), note.id)
    console.print(table)


@app.command("categories")
def list_categories():
    """List the available note categories."""
    table = Table("Tag", "Label")
    for tag, label in category_choices():
        table.add_row(tag, label)
    console.print(table)


@app.command("delete")
def delete_note(note_id: str):
    """Delete a note."""
    store = state.load_store()
    try:
        store.delete_note(note_id)
        state.save_store(store)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print(f"Deleted note [bold]{note_id}[/bold]")
