"""Rich consoles shared by the doclist commands."""

import sys

from rich.console import Console

# Tables, confirmations and JSON go to stdout; errors go to stderr so that
# `doclist list --format json` stays parseable
console = Console()
err_console = Console(stderr=True)


def is_non_interactive() -> bool:
    """True when stdin is piped, in which case `delete` skips its prompt."""
    return not sys.stdin.isatty()
