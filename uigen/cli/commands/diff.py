"""uigen diff — Line diff between two JSX files."""

from pathlib import Path

import typer
from rich.console import Console

from uigen.cli.render import print_diff
from uigen.core.diff import diff_lines

console = Console()


def diff_files(
    old: Path = typer.Argument(..., exists=True, dir_okay=False, help="Previous version"),
    new: Path = typer.Argument(..., exists=True, dir_okay=False, help="New version"),
):
    """Show which lines of NEW are added or unchanged, then which lines of OLD were removed.

    Matching is by line membership, not position.

    Example:
        uigen diff v1.jsx v2.jsx
    """
    print_diff(console, diff_lines(old.read_text(encoding="utf-8"), new.read_text(encoding="utf-8")))
