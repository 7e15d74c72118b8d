"""uigen generate — Run one plan → generate → explain pass from the command line."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from uigen.cli.backend import open_backend
from uigen.cli.render import print_code, print_diff, print_explanation, print_plan
from uigen.core.session import SessionState
from uigen.exceptions import ConfigurationError, EmptyPromptError
from uigen.studio import Studio

console = Console()


async def _generate(prompt: str, existing_code: Optional[str], remote: Optional[str], output: Optional[Path]) -> bool:
    from uigen.config import config

    async with open_backend(config, remote) as backend:
        studio = Studio(backend, config.allowed_components, SessionState(code=existing_code or ""))
        with console.status(f"[blue]Generating:[/blue] {prompt}"):
            update = await studio.generate(prompt)

    if not update.accepted:
        console.print(f"[bold red]{update.notice}[/bold red]")
        if update.rejected_component:
            console.print(f"[dim]Rejected component: {update.rejected_component}[/dim]")
        return False

    state = update.state
    print_plan(console, state.plan)
    print_code(console, state.code)
    if existing_code:
        print_diff(console, state.last_diff)
    print_explanation(console, state.explanation)

    if output is not None:
        output.write_text(state.code + "\n", encoding="utf-8")
        console.print(f"[green]Wrote[/green] {output}")
    return True


def generate_once(
    prompt: str = typer.Argument(..., help="Describe the UI or the change"),
    existing: Path = typer.Option(None, "--existing", "-e", exists=True, dir_okay=False, help="Current JSX to modify"),
    remote: str = typer.Option(None, "--remote", "-r", help="uigen server URL; runs in-process when omitted"),
    output: Path = typer.Option(None, "--output", "-o", dir_okay=False, help="Write accepted JSX here"),
):
    """Generate (or modify) a UI once and print plan, code, diff and explanation.

    Exits with status 1 when the generation fails or the markup uses a
    component outside the whitelist.

    Example:
        uigen generate "add a login card"
        uigen generate "add a navbar" --existing login.jsx --output login.jsx
    """
    existing_code = existing.read_text(encoding="utf-8").strip() if existing else None
    try:
        ok = asyncio.run(_generate(prompt, existing_code, remote, output))
    except (EmptyPromptError, ConfigurationError) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise typer.Exit(1)
    if not ok:
        raise typer.Exit(1)
