"""Thin wrapper around litellm for uigen.

litellm handles Groq, OpenAI, Anthropic, Ollama and 100+ providers. This
wrapper adds: config defaults, a per-call timeout, error normalization and
usage extraction.

Usage:
  LLMClient()                                   # config.default_llm_model
  LLMClient(model="openai/gpt-4o-mini")         # explicit override
"""

import asyncio
import logging
from typing import Optional

import litellm

from uigen.config import UIGenConfig, config as default_config
from uigen.exceptions import UpstreamCallError

logger = logging.getLogger(__name__)


def is_local_model(model: str) -> bool:
    """Return True if the model runs locally via Ollama (no API key required)."""
    return model.startswith("ollama/") or model.startswith("ollama_chat/")


class LLMClient:
    """Thin wrapper around litellm for uigen usage."""

    def __init__(self, model: str = None, config: Optional[UIGenConfig] = None):
        """
        Args:
            model:  Explicit litellm model string, e.g. "groq/llama-3.1-8b-instant".
                    Defaults to config.default_llm_model.
            config: Settings to read credentials, limits and timeout from.
        """
        self._config = config or default_config
        self.model = model or self._config.default_llm_model
        litellm.drop_params = True  # ignore unsupported params per provider

    async def complete(
        self,
        messages: list[dict],
        temperature: float = None,
        max_tokens: int = None,
        stage: str = "",
    ) -> dict:
        """Call LLM via litellm.acompletion().

        Args:
            messages:    Chat messages [{"role": "system"|"user", "content": "..."}]
            temperature: Override config temperature
            max_tokens:  Override config max_tokens
            stage:       Pipeline stage name, attached to errors and logs

        Returns:
            {"content": str, "usage": {"input_tokens": int, "output_tokens": int}}

        Raises:
            UpstreamCallError: On any provider error, timeout, or malformed response
        """
        kwargs = {
            "model": self.model,
            "messages": messages,
            "temperature": self._config.llm_temperature if temperature is None else temperature,
            "max_tokens": self._config.llm_max_tokens if max_tokens is None else max_tokens,
        }
        if self._config.llm_api_key and not is_local_model(self.model):
            kwargs["api_key"] = self._config.llm_api_key

        try:
            response = await asyncio.wait_for(
                litellm.acompletion(**kwargs),
                timeout=self._config.llm_timeout_seconds,
            )
        except asyncio.TimeoutError:
            raise UpstreamCallError(
                f"LLM call timed out after {self._config.llm_timeout_seconds}s",
                stage=stage,
                details={"model": self.model},
            )
        except Exception as e:
            raise UpstreamCallError(
                f"LLM call failed: {e}", stage=stage, details={"model": self.model}
            )

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, KeyError, TypeError) as e:
            raise UpstreamCallError(
                f"LLM response is malformed: {e}", stage=stage, details={"model": self.model}
            )
        if content is None:
            raise UpstreamCallError(
                "LLM response has no content", stage=stage, details={"model": self.model}
            )

        usage = getattr(response, "usage", None)
        return {
            "content": content,
            "usage": {
                "input_tokens": getattr(usage, "prompt_tokens", 0) or 0,
                "output_tokens": getattr(usage, "completion_tokens", 0) or 0,
            },
        }
