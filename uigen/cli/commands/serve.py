"""uigen serve — Start the generation API server."""

import typer
from rich.console import Console

console = Console()


def serve(
    host: str = typer.Option(None, help="Host to bind to (default: UIGEN_HOST)"),
    port: int = typer.Option(None, help="Port to listen on (default: UIGEN_PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes"),
):
    """Start the uigen API server.

    Refuses to start when no LLM credential is configured.

    Example:
        GROQ_API_KEY=... uigen serve --port 5000
    """
    import uvicorn
    from uigen.config import config

    host = host or config.host
    port = port or config.port
    console.print(f"[green]Starting uigen server on {host}:{port}[/green]  [dim]model={config.default_llm_model}[/dim]")
    uvicorn.run("uigen.api.main:app", host=host, port=port, reload=reload)
