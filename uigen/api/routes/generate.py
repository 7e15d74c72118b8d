"""POST /generate — run the plan → generate → explain pipeline."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from uigen.api.schemas import ErrorResponse, GenerateRequest, GenerateResponse, PlanResponse
from uigen.exceptions import GenerationError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["generate"])

GENERIC_ERROR = "Error generating UI"


def _get_pipeline(request: Request):
    pipeline = getattr(request.app.state, "pipeline", None)
    if pipeline is None:
        raise HTTPException(status_code=503, detail="Pipeline not initialised.")
    return pipeline


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={500: {"model": ErrorResponse}},
)
async def generate_ui(body: GenerateRequest, pipeline=Depends(_get_pipeline)):
    """Plan, generate and explain a UI for the prompt.

    Every pipeline failure (upstream error, unparseable plan) maps to the same
    500 body; stage details only go to the log.
    """
    try:
        result = await pipeline.run(body.prompt, body.existing_code)
    except GenerationError as exc:
        logger.error(f"[generate] {type(exc).__name__}: {exc}")
        return JSONResponse(status_code=500, content={"error": GENERIC_ERROR})

    return GenerateResponse(
        plan=PlanResponse(
            layout=result.plan.layout,
            components=list(result.plan.components),
            description=result.plan.description,
        ),
        code=result.code,
        explanation=result.explanation,
    )
