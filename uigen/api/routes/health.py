"""GET /health — liveness plus the model and whitelist in use."""

from fastapi import APIRouter, Request

from uigen.api.schemas import HealthResponse
from uigen.version import __version__

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    pipeline = getattr(request.app.state, "pipeline", None)
    if pipeline is None:
        cfg = request.app.state.config
        return HealthResponse(
            status="degraded",
            version=__version__,
            model=cfg.default_llm_model,
            allowed_components=list(cfg.allowed_components),
        )
    info = pipeline.describe()
    return HealthResponse(
        status="ok",
        version=__version__,
        model=info["model"],
        allowed_components=info["allowed_components"],
    )
