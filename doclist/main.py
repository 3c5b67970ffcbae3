#!/usr/bin/env python3
"""
Main CLI entry point for doclist
"""

import sqlite3
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from doclist import __version__
from doclist.commands.browse import app as browse_app
from doclist.commands.documents import app as documents_app
from doclist.config.constants import DB_PATH_ENV_VAR
from doclist.database import db_connection
from doclist.exceptions import ConfigurationError
from doclist.utils.logging_utils import setup_cli_logging
from doclist.utils.output import err_console

app = typer.Typer(
    help="doclist - a searchable, sortable list of documents backed by SQLite",
    no_args_is_help=True,
)


@app.command()
def version():
    """Show doclist version"""
    typer.echo(f"doclist version {__version__}")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    db: Optional[Path] = typer.Option(
        None, "--db", envvar=DB_PATH_ENV_VAR, help="Path to the SQLite database file"
    ),
):
    """
    doclist - a searchable, sortable list of documents backed by SQLite

    [bold]Examples:[/bold]

    Save a document:
        [cyan]doclist add Budget "Q3 numbers"[/cyan]

    Find documents by name or content:
        [cyan]doclist search frui[/cyan]

    Browse interactively:
        [cyan]doclist browse[/cyan]
    """
    setup_cli_logging(verbose)

    if db is not None:
        db_connection.db_path = db.expanduser()

    try:
        db_connection.ensure_schema()
    except (sqlite3.Error, ConfigurationError) as e:
        err_console.print(f"[red]Cannot open database: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e


app.add_typer(documents_app)
app.add_typer(browse_app)


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
