"""FastAPI application factory with lifespan management."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from uigen.config import UIGenConfig, config as default_config
from uigen.version import __version__

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        return response


def build_pipeline(cfg: UIGenConfig):
    """Wire LLMClient + UIPipeline from configuration.

    Raises:
        ConfigurationError: no completion-service credential is configured.
    """
    from uigen.callbacks import LoggingCallback
    from uigen.llm.client import LLMClient, is_local_model
    from uigen.pipeline import UIPipeline

    if not is_local_model(cfg.default_llm_model):
        cfg.require_llm_credentials()
    llm_client = LLMClient(config=cfg)
    return UIPipeline(llm_client=llm_client, config=cfg, callbacks=[LoggingCallback()])


def create_app(cfg: Optional[UIGenConfig] = None, pipeline=None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        cfg:      Settings; defaults to the module-level config.
        pipeline: Prebuilt pipeline (tests inject a fake). When omitted the
                  lifespan builds one and refuses to start without credentials.
    """
    cfg = cfg or default_config

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # ── Startup ──
        logger.info(f"uigen v{__version__} starting...")
        if getattr(app.state, "pipeline", None) is None:
            app.state.pipeline = build_pipeline(cfg)
        logger.info(
            f"uigen v{__version__} ready — model={cfg.default_llm_model} "
            f"components={app.state.pipeline.allowed}"
        )

        yield

        # ── Shutdown ──
        logger.info("uigen shutting down...")

    app = FastAPI(
        title="uigen",
        description="Prompt-to-UI generation: plan, generate and explain JSX from a description.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = cfg
    app.state.pipeline = pipeline

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Security headers: outermost middleware, applied to all responses
    app.add_middleware(SecurityHeadersMiddleware)

    # Routes
    from uigen.api.routes import generate, health
    app.include_router(generate.router)
    app.include_router(health.router)

    return app


app = create_app()
