"""Rich renderers shared by the CLI commands."""

import json
from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from uigen.core.diff import summarize
from uigen.types import DiffKind, DiffLine, Plan

_DIFF_STYLE = {
    DiffKind.ADDED: ("+ ", "green"),
    DiffKind.REMOVED: ("- ", "red"),
    DiffKind.UNCHANGED: ("  ", "dim"),
}


def print_plan(console: Console, plan: Optional[Plan]) -> None:
    if plan is None:
        body = "[dim]Plan will appear here[/dim]"
    else:
        body = Syntax(
            json.dumps(plan.model_dump(mode="json"), indent=2),
            "json", theme="ansi_dark", background_color="default",
        )
    console.print(Panel(body, title="[bold]Planner Output[/bold]", border_style="blue"))


def print_code(console: Console, code: str) -> None:
    body = Syntax(code, "jsx", theme="ansi_dark", background_color="default") if code else "[dim]No UI yet[/dim]"
    console.print(Panel(body, title="[bold]Generated Code[/bold]", border_style="green"))


def print_explanation(console: Console, explanation: str) -> None:
    console.print(Panel(
        explanation or "[dim]Explanation will appear here[/dim]",
        title="[bold]Explanation[/bold]",
        border_style="magenta",
    ))


def print_diff(console: Console, diff: Optional[Sequence[DiffLine]]) -> None:
    if diff is None:
        console.print("[dim]No previous version to compare against.[/dim]")
        return
    text = Text()
    for line in diff:
        prefix, style = _DIFF_STYLE[line.kind]
        text.append(prefix + line.content + "\n", style=style)
    counts = summarize(diff)
    subtitle = (
        f"[green]+{counts['added']}[/green] "
        f"[red]-{counts['removed']}[/red] "
        f"[dim]={counts['unchanged']}[/dim]"
    )
    console.print(Panel(text, title="[bold]Diff[/bold]", subtitle=subtitle, border_style="yellow"))


def print_history(console: Console, entries) -> None:
    entries = list(entries)
    if not entries:
        console.print("[dim]History is empty.[/dim]")
        return
    table = Table(box=box.SIMPLE, header_style="bold dim")
    table.add_column("#", justify="right", width=3)
    table.add_column("Layout", style="cyan")
    table.add_column("Components")
    table.add_column("Lines", justify="right")
    for i, entry in enumerate(entries, 1):
        table.add_row(
            str(i),
            entry.plan.layout if entry.plan else "-",
            ", ".join(entry.plan.components) if entry.plan else "-",
            str(len(entry.code.splitlines())),
        )
    console.print(table)
