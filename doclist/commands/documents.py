"""
Document commands for doclist
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from doclist.config.constants import DELETE_FAILED_MESSAGE, SCREEN_TITLE
from doclist.database import get_document, save_document, update_document
from doclist.database.repository import SQLiteDocumentRepository
from doclist.exceptions import DeleteFailedError
from doclist.ui.formatting import format_modified, format_size
from doclist.ui.presenters import DocumentListPresenter
from doclist.utils.output import console, err_console, is_non_interactive

app = typer.Typer(help="Document operations")


def _read_content(content: str | None, file_path: Path | None) -> str:
    """Content priority: --file > positional argument > piped stdin."""
    if file_path is not None:
        if not file_path.is_file():
            err_console.print(f"[red]Error: File not found: {escape(str(file_path))}[/red]")
            raise typer.Exit(1)
        return file_path.read_text(encoding="utf-8")
    if content is not None:
        return content
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return ""


def _render(presenter: DocumentListPresenter, title: str, output_format: str) -> None:
    if output_format == "json":
        console.print_json(data=[doc.to_dict() for doc in presenter.documents], default=str)
        return

    if presenter.row_count == 0:
        console.print("[yellow]No documents found[/yellow]")
        return

    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="magenta")
    table.add_column("Size", justify="right", style="green")
    table.add_column("Modified", style="yellow")

    for index in range(presenter.row_count):
        row = presenter.row_at(index)
        table.add_row(str(row.id), Text(row.name), row.size_text, row.modified_text)

    console.print(table)


def _check_format(output_format: str) -> None:
    if output_format not in ("table", "json"):
        err_console.print(f"[red]Unknown format: {escape(output_format)}. Use table or json.[/red]")
        raise typer.Exit(2)


@app.command()
def add(
    name: str = typer.Argument(..., help="Document name"),
    content: str | None = typer.Argument(None, help="Document content (or pipe via stdin)"),
    file: Path | None = typer.Option(None, "--file", "-f", help="Read content from a file"),
) -> None:
    """Save a new document"""
    body = _read_content(content, file)
    doc_id = save_document(name, body)
    doc = get_document(doc_id)
    console.print(
        f"[green]Saved document #{doc_id}:[/green] {escape(name)} ({format_size(doc.size)})"
    )


@app.command()
def edit(
    doc_id: int = typer.Argument(..., help="Document ID"),
    name: str | None = typer.Option(None, "--name", "-n", help="New name"),
    content: str | None = typer.Option(None, "--content", "-c", help="New content"),
) -> None:
    """Update a document's name and/or content"""
    if name is None and content is None:
        err_console.print("[red]Nothing to update: pass --name and/or --content[/red]")
        raise typer.Exit(1)

    if not update_document(doc_id, name=name, content=content):
        err_console.print(f"[red]Document #{doc_id} not found[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Updated document #{doc_id}[/green]")


@app.command("list")
def list_command(
    output_format: str = typer.Option("table", "--format", help="Output format: table, json"),
) -> None:
    """List all documents, sorted by name"""
    _check_format(output_format)
    presenter = DocumentListPresenter(SQLiteDocumentRepository())
    result = presenter.clear_search()
    if not result.ok:
        err_console.print(f"[red]{result.error.message}[/red]")
        raise typer.Exit(1)
    _render(presenter, SCREEN_TITLE, output_format)


@app.command()
def search(
    term: str = typer.Argument(..., help="Text to find in name or content"),
    output_format: str = typer.Option("table", "--format", help="Output format: table, json"),
) -> None:
    """Find documents whose name or content contains TERM (case-insensitive)"""
    _check_format(output_format)
    presenter = DocumentListPresenter(SQLiteDocumentRepository())
    result = presenter.search(term)
    if not result.ok:
        err_console.print(f"[red]{result.error.message}[/red]")
        raise typer.Exit(1)
    _render(presenter, f"{SCREEN_TITLE} matching '{escape(term)}'", output_format)


@app.command()
def delete(
    doc_id: int = typer.Argument(..., help="Document ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
) -> None:
    """Permanently delete a document"""
    doc = get_document(doc_id)
    if doc is None:
        err_console.print(f"[red]Document #{doc_id} not found[/red]")
        raise typer.Exit(1)

    console.print(
        f"Will delete #{doc.id} [bold]{escape(doc.name)}[/bold] "
        f"({format_size(doc.size)}, modified {format_modified(doc.modified_date)})"
    )

    # Confirmation (skip when stdin is not a TTY to avoid hanging)
    if not force and not is_non_interactive():
        typer.confirm("Continue?", abort=True)

    try:
        SQLiteDocumentRepository().delete(doc_id)
    except DeleteFailedError as e:
        err_console.print(f"[red]{DELETE_FAILED_MESSAGE}[/red]")
        raise typer.Exit(1) from e
    console.print(f"[green]Deleted document #{doc_id}[/green]")
