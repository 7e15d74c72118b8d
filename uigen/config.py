"""Application configuration. All env vars defined here with defaults."""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from uigen.components import component_names
from uigen.exceptions import ConfigurationError


class UIGenConfig(BaseSettings):
    # ── App ──
    app_name: str = "uigen"
    debug: bool = False
    log_level: str = "INFO"

    # ── LLM (litellm) ──
    default_llm_model: str = "groq/llama-3.1-8b-instant"
    llm_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("UIGEN_LLM_API_KEY", "GROQ_API_KEY"),
    )
    llm_max_tokens: int = 2048
    llm_temperature: float = 0.2
    llm_timeout_seconds: float = 30.0       # per stage; expiry counts as an upstream failure

    # ── Whitelist ──
    allowed_components: list[str] = Field(default_factory=component_names)

    # ── Server ──
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: list[str] = ["http://localhost:5173"]  # Vite dev server

    # ── Client ──
    client_timeout_seconds: float = 120.0

    model_config = {
        "env_prefix": "UIGEN_",
        "env_file": ".env",
        "extra": "ignore",
        "populate_by_name": True,
    }

    def require_llm_credentials(self) -> str:
        """Return the completion-service credential or raise ConfigurationError.

        Called once at server startup. A missing key is fatal there and never a
        per-request error.
        """
        if not self.llm_api_key:
            raise ConfigurationError(
                "No LLM credential configured. Set GROQ_API_KEY or UIGEN_LLM_API_KEY.",
                details={"model": self.default_llm_model},
            )
        return self.llm_api_key


config = UIGenConfig()
