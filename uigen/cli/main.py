"""uigen CLI — Typer application."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from uigen.version import __version__

app = typer.Typer(
    name="uigen",
    help="uigen — describe a UI, get JSX built from a fixed component library.",
    no_args_is_help=True,
    invoke_without_command=True,
)
console = Console()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", is_eager=True, help="Show version"),
    log_level: str = typer.Option(None, "--log-level", help="Override UIGEN_LOG_LEVEL"),
):
    """uigen CLI."""
    if version:
        console.print(f"uigen v{__version__}")
        raise typer.Exit()
    from uigen.config import config
    configure_logging(log_level or config.log_level)
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


from uigen.cli.commands import serve, generate, studio, validate, diff, config as config_cmd  # noqa: E402

app.command(name="serve", help="Run the generation API server")(serve.serve)
app.command(name="generate", help="Run one plan → generate → explain pass")(generate.generate_once)
app.command(name="studio", help="Interactive session with undo and diff")(studio.studio_session)
app.command(name="validate", help="Check a JSX file against the component whitelist")(validate.validate_file)
app.command(name="diff", help="Line diff between two JSX files")(diff.diff_files)
app.command(name="config", help="Show resolved configuration")(config_cmd.config_show)


if __name__ == "__main__":
    app()
