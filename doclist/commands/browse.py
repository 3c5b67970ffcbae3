"""
Interactive browser command for doclist
"""

import typer
from rich.markup import escape

from doclist.utils.output import err_console

app = typer.Typer()


@app.command()
def browse() -> None:
    """Open the searchable document list (TUI)."""
    from doclist.ui.app import run_browser

    try:
        run_browser()
    except KeyboardInterrupt:
        pass
    except Exception as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e
