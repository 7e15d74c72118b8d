"""Backend selection for CLI commands: in-process pipeline or remote server."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from uigen.config import UIGenConfig
from uigen.studio import GenerationBackend, PipelineBackend, RemoteBackend


@asynccontextmanager
async def open_backend(cfg: UIGenConfig, remote: Optional[str]) -> AsyncIterator[GenerationBackend]:
    """Yield a backend for the session.

    With `remote` set, generations go to that uigen server. Otherwise the
    pipeline runs in-process, which needs the LLM credential locally.

    Raises:
        ConfigurationError: in-process mode without a credential.
    """
    if remote:
        from uigen.client import UIGenClient
        async with UIGenClient(base_url=remote, timeout=cfg.client_timeout_seconds) as client:
            yield RemoteBackend(client)
        return

    from uigen.api.main import build_pipeline
    yield PipelineBackend(build_pipeline(cfg))
