"""Pydantic models for API request/response. Mirrors types.py for API I/O."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ── Requests ──

class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt: str = Field(..., max_length=10000)               # "add a login card"
    existing_code: Optional[str] = Field(default=None, alias="existingCode", max_length=100000)

    @field_validator("prompt")
    @classmethod
    def _prompt_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("prompt must not be blank")
        return value


# ── Responses ──

class PlanResponse(BaseModel):
    layout: str
    components: list[str]
    description: str

class GenerateResponse(BaseModel):
    plan: PlanResponse
    code: str                           # raw markup, untrusted until validated client-side
    explanation: str

class ErrorResponse(BaseModel):
    error: str

class HealthResponse(BaseModel):
    status: str
    version: str
    model: str
    allowed_components: list[str]
