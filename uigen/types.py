"""All shared types and enums. Everything imports from here."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ── Enums ──────────────────────────────────────────────────────────────

class DiffKind(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


# ── Pipeline Shapes ────────────────────────────────────────────────────

class GenerationRequest(BaseModel):
    """What the client asks the pipeline for."""
    model_config = ConfigDict(populate_by_name=True)

    prompt: str
    existing_code: Optional[str] = Field(default=None, alias="existingCode")

    @field_validator("prompt")
    @classmethod
    def _prompt_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("prompt must not be blank")
        return value


class Plan(BaseModel):
    """Stage 1 output: layout, ordered component names, short description."""
    model_config = ConfigDict(frozen=True)

    layout: str = ""
    components: tuple[str, ...] = ()
    description: str = ""

    @field_validator("components", mode="before")
    @classmethod
    def _coerce_components(cls, value):
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        if not isinstance(value, (list, tuple)):
            raise ValueError(f"components must be a list, got {type(value).__name__}")
        return tuple(str(v) for v in value)

    @field_validator("layout", "description", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        return "" if value is None else str(value)


class GenerationResult(BaseModel):
    """Everything one pipeline run produces. `code` is untrusted until validated."""
    model_config = ConfigDict(frozen=True)

    plan: Plan
    code: str
    explanation: str


# ── Session Shapes ─────────────────────────────────────────────────────

class HistoryEntry(BaseModel):
    """Snapshot of the session captured before an accepted generation."""
    model_config = ConfigDict(frozen=True)

    code: str
    explanation: str = ""
    plan: Optional[Plan] = None


class DiffLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: DiffKind
    content: str
