"""Studio — the interactive driver that owns one session.

The studio is the single writer of SessionState. Each generate() call runs
begin → backend → apply as one step; the pending flag set by begin_request
rejects a second submission while the first is in flight.

Backends produce a GenerationResult for (prompt, existing_code):
  PipelineBackend — runs UIPipeline in-process
  RemoteBackend   — calls a uigen server through UIGenClient
"""

import logging
from typing import Iterable, Optional, Protocol

from uigen.client import UIGenClient, UIGenClientError
from uigen.core import session as session_ops
from uigen.core.session import SessionState, SessionUpdate
from uigen.exceptions import GenerationError
from uigen.pipeline import UIPipeline
from uigen.types import GenerationResult

logger = logging.getLogger(__name__)


class GenerationBackend(Protocol):
    async def generate(self, prompt: str, existing_code: Optional[str]) -> GenerationResult:
        ...


class PipelineBackend:
    """Runs the pipeline in the current process."""

    def __init__(self, pipeline: UIPipeline):
        self._pipeline = pipeline

    async def generate(self, prompt: str, existing_code: Optional[str]) -> GenerationResult:
        return await self._pipeline.run(prompt, existing_code)


class RemoteBackend:
    """Calls a running uigen server."""

    def __init__(self, client: UIGenClient):
        self._client = client

    async def generate(self, prompt: str, existing_code: Optional[str]) -> GenerationResult:
        return await self._client.generate(prompt, existing_code)


class Studio:
    """Holds the current session and applies generations and undos to it.

    Args:
        backend: Where generations come from.
        allowed: Component whitelist enforced before a result is committed.
        state:   Starting state; a fresh empty session by default.
    """

    def __init__(
        self,
        backend: GenerationBackend,
        allowed: Iterable[str],
        state: Optional[SessionState] = None,
    ):
        self._backend = backend
        self._allowed = list(allowed)
        self._state = state or SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def allowed(self) -> list[str]:
        return list(self._allowed)

    async def generate(self, prompt: str) -> SessionUpdate:
        """Submit a prompt against the current code and apply the outcome.

        Raises:
            EmptyPromptError:       prompt is blank; no request is made.
            RequestInProgressError: a generation is already running.
        """
        self._state = session_ops.begin_request(self._state, prompt)
        existing = self._state.code or None
        try:
            result = await self._backend.generate(prompt, existing)
        except (GenerationError, UIGenClientError) as exc:
            logger.error(f"[studio] Generation failed: {exc}")
            update = session_ops.apply_failure(self._state)
        except Exception:
            self._state = self._state.model_copy(update={"pending": False})
            raise
        else:
            update = session_ops.apply_result(self._state, result, self._allowed)
        self._state = update.state
        return update

    def undo(self) -> bool:
        """Step back one generation. Returns False when there was nothing to undo."""
        if not self._state.can_undo:
            return False
        self._state = session_ops.undo(self._state)
        return True
