"""Photo commands for the visitreport CLI."""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from visitreport.cli.utils import state

app = typer.Typer(help="Attach photos to visits")
console = Console()


@app.command("add")
def add_photo(
    visit_id: str,
    photo_url: str = typer.Argument(..., help="Retrievable URL of the uploaded photo"),
    caption: str = typer.Option("", help="Optional caption"),
):
    """Attach a photo to a visit."""
    store = state.load_store()
    try:
        photo = store.add_photo(visit_id, photo_url, caption)
        state.save_store(store)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print(f"Added photo [bold]{photo.id}[/bold]")


@app.command("list")
def list_photos(visit_id: str):
    """List a visit's photos, newest first."""
    store = state.load_store()
    photos = store.list_photos(visit_id)

    if not photos:
        console.print("No photos found")
        return

    table = Table("Caption", "URL", "ID")
    for photo in photos:
        table.add_row(escape(photo.caption), escape(photo.photo_url), photo.id)
    console.print(table)


@app.command("delete")
def delete_photo(photo_id: str):
    """Delete a photo."""
    store = state.load_store()
    try:
        store.delete_photo(photo_id)
        state.save_store(store)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)
    console.print(f"Deleted photo [bold]{photo_id}[/bold]")
