"""uigen validate — Check a JSX file against the component whitelist."""

from pathlib import Path

import typer
from rich.console import Console

from uigen.core.fences import unwrap_jsx
from uigen.core.validator import find_disallowed, whitelist_warning

console = Console()


def validate_file(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSX file to check"),
    allow: list[str] = typer.Option(None, "--allow", "-a", help="Allowed component (repeatable); defaults to UIGEN_ALLOWED_COMPONENTS"),
):
    """Scan a JSX file for component tags outside the whitelist.

    Example:
        uigen validate login.jsx
        uigen validate login.jsx -a Card -a Input -a Button
    """
    from uigen.config import config

    allowed = list(allow) if allow else list(config.allowed_components)
    markup = unwrap_jsx(path.read_text(encoding="utf-8"))
    offending = find_disallowed(markup, allowed)
    if offending is not None:
        console.print(f"[bold red]{whitelist_warning(allowed)}[/bold red]")
        console.print(f"[dim]First disallowed component: {offending}[/dim]")
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] {path} uses only allowed components")
