"""uigen studio — Interactive generation session with undo and diff."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.prompt import Prompt

from uigen.cli.backend import open_backend
from uigen.cli.render import print_code, print_diff, print_explanation, print_history, print_plan
from uigen.exceptions import ConfigurationError, EmptyPromptError, RequestInProgressError
from uigen.studio import Studio

console = Console()

HELP_TEXT = """[bold]Commands[/bold]
  [cyan]<text>[/cyan]        generate, or modify the current UI
  [cyan]:undo[/cyan]         restore the previous version
  [cyan]:diff[/cyan]         show the diff from the last accepted generation
  [cyan]:plan[/cyan]         show the current plan
  [cyan]:code[/cyan]         show the current code
  [cyan]:history[/cyan]      list saved versions
  [cyan]:save FILE[/cyan]    write the current code to FILE
  [cyan]:help[/cyan]         this message
  [cyan]:quit[/cyan]         leave the studio"""


def _show_state(studio: Studio) -> None:
    state = studio.state
    print_plan(console, state.plan)
    print_code(console, state.code)
    print_explanation(console, state.explanation)


async def _submit(studio: Studio, prompt: str) -> None:
    try:
        with console.status("[blue]Generating...[/blue]"):
            update = await studio.generate(prompt)
    except EmptyPromptError:
        return
    except RequestInProgressError as exc:
        console.print(f"[yellow]{exc}[/yellow]")
        return

    if not update.accepted:
        console.print(f"[bold red]{update.notice}[/bold red]")
        return
    _show_state(studio)
    if update.state.last_diff is not None:
        print_diff(console, update.state.last_diff)


def _handle_command(studio: Studio, command: str) -> bool:
    """Run a ':' command. Returns False when the session should end."""
    name, _, arg = command.partition(" ")
    if name in (":q", ":quit", ":exit"):
        return False
    if name == ":undo":
        if studio.undo():
            console.print("[green]Restored previous version.[/green]")
            _show_state(studio)
        else:
            console.print("[dim]Nothing to undo.[/dim]")
    elif name == ":diff":
        print_diff(console, studio.state.last_diff)
    elif name == ":plan":
        print_plan(console, studio.state.plan)
    elif name == ":code":
        print_code(console, studio.state.code)
    elif name == ":history":
        print_history(console, studio.state.history)
    elif name == ":save":
        if not arg.strip():
            console.print("[yellow]Usage: :save FILE[/yellow]")
        else:
            Path(arg.strip()).write_text(studio.state.code + "\n", encoding="utf-8")
            console.print(f"[green]Wrote[/green] {arg.strip()}")
    elif name == ":help":
        console.print(HELP_TEXT)
    else:
        console.print(f"[yellow]Unknown command {name!r}. Type :help.[/yellow]")
    return True


async def _run_studio(remote: Optional[str]) -> None:
    from uigen.config import config

    async with open_backend(config, remote) as backend:
        studio = Studio(backend, config.allowed_components)
        console.print(f"[bold]uigen studio[/bold]  [dim]components: {', '.join(studio.allowed)}[/dim]")
        console.print("[dim]Type :help for commands.[/dim]")
        while True:
            line = await asyncio.to_thread(
                Prompt.ask, "[bold cyan]describe[/bold cyan]", console=console, default="", show_default=False,
            )
            text = line.strip()
            if not text:
                continue
            if text.startswith(":"):
                if not _handle_command(studio, text):
                    break
                continue
            await _submit(studio, text)


def studio_session(
    remote: str = typer.Option(None, "--remote", "-r", help="uigen server URL; runs in-process when omitted"),
):
    """Start an interactive session: describe a UI, refine it, undo, compare versions.

    Example:
        uigen studio
        uigen studio --remote http://localhost:5000
    """
    try:
        asyncio.run(_run_studio(remote))
    except ConfigurationError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Bye.[/yellow]")
