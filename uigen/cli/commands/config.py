"""uigen config — Show resolved configuration."""

from rich import box
from rich.console import Console
from rich.table import Table

console = Console()


def config_show():
    """Show the resolved uigen configuration.

    Reads from environment variables and .env file. The LLM key is masked.

    Example:
        uigen config
    """
    from uigen.config import UIGenConfig
    cfg = UIGenConfig()

    def mask(val) -> str:
        if not val:
            return "[red]not set[/red]"
        s = str(val)
        if len(s) <= 8:
            return "***"
        return s[:4] + "…" + "***"

    table = Table(
        box=box.ROUNDED,
        header_style="bold dim",
        title="[bold]uigen Configuration[/bold]",
    )
    table.add_column("Key", style="cyan", width=24)
    table.add_column("Value", width=50)
    table.add_column("Env Var", style="dim", width=32)

    rows = [
        ("log_level", cfg.log_level, "UIGEN_LOG_LEVEL"),
        ("default_llm_model", cfg.default_llm_model, "UIGEN_DEFAULT_LLM_MODEL"),
        ("llm_api_key", mask(cfg.llm_api_key), "GROQ_API_KEY / UIGEN_LLM_API_KEY"),
        ("llm_max_tokens", cfg.llm_max_tokens, "UIGEN_LLM_MAX_TOKENS"),
        ("llm_temperature", cfg.llm_temperature, "UIGEN_LLM_TEMPERATURE"),
        ("llm_timeout_seconds", cfg.llm_timeout_seconds, "UIGEN_LLM_TIMEOUT_SECONDS"),
        ("allowed_components", ", ".join(cfg.allowed_components), "UIGEN_ALLOWED_COMPONENTS"),
        ("host", cfg.host, "UIGEN_HOST"),
        ("port", cfg.port, "UIGEN_PORT"),
        ("cors_origins", ", ".join(cfg.cors_origins), "UIGEN_CORS_ORIGINS"),
    ]
    for key, value, env in rows:
        table.add_row(key, str(value), env)
    console.print(table)
