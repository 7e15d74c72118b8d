"""Session state and the transforms that move it forward.

Every operation takes a SessionState and returns a new one; nothing here
mutates in place or keeps module-level state. The interactive driver
(uigen.studio.Studio) is the single writer that holds the current value.

State only changes after a full pipeline run has completed and its markup has
passed the whitelist, so readers never observe a half-applied generation.
"""

import logging
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field

from uigen.core.diff import diff_lines
from uigen.core.fences import unwrap_jsx
from uigen.core.history import HistoryStack
from uigen.core.validator import ensure_allowed, whitelist_warning
from uigen.exceptions import EmptyPromptError, RequestInProgressError, WhitelistViolation
from uigen.types import DiffLine, GenerationResult, HistoryEntry, Plan

logger = logging.getLogger(__name__)

GENERIC_FAILURE_NOTICE = "⚠ Error generating UI"


class SessionState(BaseModel):
    """Everything the interactive surface shows, as one immutable value."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    code: str = ""
    explanation: str = ""
    plan: Optional[Plan] = None
    history: HistoryStack = Field(default_factory=HistoryStack)
    last_diff: Optional[tuple[DiffLine, ...]] = None
    pending: bool = False

    @property
    def has_code(self) -> bool:
        return bool(self.code)

    @property
    def can_undo(self) -> bool:
        return bool(self.history)


class SessionUpdate(BaseModel):
    """Outcome of applying a pipeline result (or failure) to a session."""
    model_config = ConfigDict(frozen=True)

    state: SessionState
    accepted: bool
    notice: Optional[str] = None
    rejected_component: Optional[str] = None


def begin_request(state: SessionState, prompt: str) -> SessionState:
    """Mark a request as in flight.

    Raises:
        EmptyPromptError:       prompt is blank.
        RequestInProgressError: another request is already pending.
    """
    if not prompt or not prompt.strip():
        raise EmptyPromptError("Prompt is empty.")
    if state.pending:
        raise RequestInProgressError("A generation is already in progress.")
    return state.model_copy(update={"pending": True})


def apply_result(
    state: SessionState,
    result: GenerationResult,
    allowed: Iterable[str],
) -> SessionUpdate:
    """Gate `result` through the whitelist and advance the session if it passes.

    A rejected result leaves code, explanation, plan, history and diff exactly
    as they were. An accepted one snapshots the previous generation (when
    there was one), diffs old against new, and replaces the current triple.
    """
    allowed = list(allowed)
    code = unwrap_jsx(result.code)

    try:
        ensure_allowed(code, allowed)
    except WhitelistViolation as exc:
        logger.warning(f"[session] Rejected generation: component {exc.component!r} not allowed")
        return SessionUpdate(
            state=state.model_copy(update={"pending": False}),
            accepted=False,
            notice=whitelist_warning(allowed),
            rejected_component=exc.component,
        )

    history = state.history
    previous_code: Optional[str] = None
    if state.has_code:
        previous_code = state.code
        history = history.push(HistoryEntry(
            code=state.code,
            explanation=state.explanation,
            plan=state.plan,
        ))

    diff = diff_lines(previous_code, code)
    new_state = state.model_copy(update={
        "code": code,
        "explanation": result.explanation,
        "plan": result.plan,
        "history": history,
        "last_diff": tuple(diff) if diff is not None else None,
        "pending": False,
    })
    logger.info(f"[session] Accepted generation ({len(code.splitlines())} lines, history depth {len(history)})")
    return SessionUpdate(state=new_state, accepted=True)


def apply_failure(state: SessionState) -> SessionUpdate:
    """Clear the pending flag after a failed run and surface the generic notice."""
    return SessionUpdate(
        state=state.model_copy(update={"pending": False}),
        accepted=False,
        notice=GENERIC_FAILURE_NOTICE,
    )


def undo(state: SessionState) -> SessionState:
    """Restore the most recent snapshot. No-op when history is empty.

    last_diff is not recomputed: after an undo it still describes the
    generation that was undone.
    """
    entry, remaining = state.history.pop()
    if entry is None:
        return state
    return state.model_copy(update={
        "code": entry.code,
        "explanation": entry.explanation,
        "plan": entry.plan,
        "history": remaining,
    })
