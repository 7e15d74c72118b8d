"""UIPipeline — turn a prompt and the current UI into a plan, new markup, and an explanation.

Three stages run strictly in order, each a single completion call:

  1. plan      — JSON {layout, components, description} restricted to the whitelist
  2. generate  — JSX built from the plan, patching existing code when present
  3. explain   — prose describing what changed

Stage N feeds stage N+1, so there is no parallelism. Any failure aborts the
run: nothing partial is returned and nothing is retried. The generate stage
does not check the whitelist; the caller does that before committing.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Awaitable, Callable, Iterable, Optional

from uigen.components import build_component_context, format_component_list
from uigen.config import UIGenConfig
from uigen.core.fences import unwrap_json
from uigen.exceptions import GenerationError, PlanParseError
from uigen.llm.client import LLMClient
from uigen.llm.prompts import (
    EXPLAIN_CHANGES,
    EXPLAIN_CHANGES_USER,
    GENERATE_UI,
    GENERATE_UI_USER,
    NO_EXISTING_UI,
    PLAN_UI,
    PLAN_UI_USER,
)
from uigen.types import GenerationResult, Plan

logger = logging.getLogger(__name__)

STAGE_PLAN = "plan"
STAGE_GENERATE = "generate"
STAGE_EXPLAIN = "explain"

Callback = Callable[[str, dict], Awaitable[None]]


class UIPipeline:
    """Run the plan → generate → explain pipeline against one LLM client.

    Args:
        llm_client: Completion client shared by all three stages.
        config:     Application configuration (whitelist, limits).
        allowed:    Component vocabulary for the prompts. Defaults to
                    config.allowed_components.
        callbacks:  Async callables ``cb(event, data)`` notified of
                    pipeline lifecycle events.
    """

    def __init__(
        self,
        llm_client: LLMClient,
        config: UIGenConfig,
        allowed: Optional[Iterable[str]] = None,
        callbacks: Optional[list[Callback]] = None,
    ) -> None:
        self._llm = llm_client
        self._config = config
        self._allowed = list(allowed) if allowed is not None else list(config.allowed_components)
        self._callbacks = list(callbacks or [])

    @property
    def allowed(self) -> list[str]:
        return list(self._allowed)

    # ── Helpers ───────────────────────────────────────────────────────────────

    async def _emit(self, event: str, data: dict) -> None:
        for cb in self._callbacks:
            try:
                await cb(event, data)
            except Exception as exc:
                logger.warning(f"[pipeline] Callback failed on {event}: {exc}")

    async def _call_llm(self, stage: str, system: str, user: str) -> str:
        """Send one system/user exchange and return the completion text."""
        messages = [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ]
        response = await self._llm.complete(messages=messages, stage=stage)
        usage = response.get("usage", {})
        logger.debug(
            f"[{stage}] {usage.get('input_tokens', 0)} in / {usage.get('output_tokens', 0)} out tokens"
        )
        return response["content"]

    @staticmethod
    def _existing(existing_code: Optional[str]) -> str:
        return existing_code or NO_EXISTING_UI

    def _parse_plan(self, raw: str) -> Plan:
        """Fence-strip and parse the plan stage output.

        Raises:
            PlanParseError: output is not a JSON object.
        """
        text = unwrap_json(raw)
        try:
            parsed = json.loads(text)
        except (json.JSONDecodeError, ValueError) as exc:
            raise PlanParseError(
                f"Plan stage returned invalid JSON: {exc}", raw=raw
            )
        if not isinstance(parsed, dict):
            raise PlanParseError(
                "Plan stage JSON is not an object (got list or scalar).", raw=raw
            )
        try:
            return Plan.model_validate(parsed)
        except (ValueError, TypeError) as exc:
            raise PlanParseError(f"Plan stage JSON has invalid fields: {exc}", raw=raw)

    # ── Stages ────────────────────────────────────────────────────────────────

    async def plan(self, prompt: str, existing_code: Optional[str] = None) -> Plan:
        """Stage 1: ask for a JSON plan restricted to the component vocabulary."""
        example = ", ".join(f'"{name}"' for name in self._allowed[:3])
        system = PLAN_UI.format(
            component_context=build_component_context(self._allowed),
            component_example=example,
            component_list=", ".join(self._allowed),
        )
        user = PLAN_UI_USER.format(prompt=prompt, existing_code=self._existing(existing_code))
        raw = await self._call_llm(STAGE_PLAN, system, user)
        return self._parse_plan(raw)

    async def generate(self, plan: Plan, existing_code: Optional[str] = None) -> str:
        """Stage 2: produce JSX for the plan. Output is returned raw and unvalidated."""
        system = GENERATE_UI.format(
            component_list=format_component_list(self._allowed),
            component_context=build_component_context(self._allowed),
        )
        user = GENERATE_UI_USER.format(
            existing_code=self._existing(existing_code),
            plan_json=json.dumps(plan.model_dump(mode="json"), indent=2),
        )
        return await self._call_llm(STAGE_GENERATE, system, user)

    async def explain(self, prompt: str, existing_code: Optional[str], new_code: str) -> str:
        """Stage 3: describe what changed between the previous and new UI."""
        user = EXPLAIN_CHANGES_USER.format(
            prompt=prompt,
            existing_code=self._existing(existing_code),
            new_code=new_code,
        )
        return await self._call_llm(STAGE_EXPLAIN, EXPLAIN_CHANGES, user)

    # ── Public API ────────────────────────────────────────────────────────────

    async def run(self, prompt: str, existing_code: Optional[str] = None) -> GenerationResult:
        """Run all three stages and return the combined result.

        Args:
            prompt:        What the user wants built or changed.
            existing_code: Currently rendered JSX, or None for a first generation.

        Returns:
            GenerationResult with the plan, the raw generated code and the explanation.

        Raises:
            UpstreamCallError: a completion call failed or timed out.
            PlanParseError:    the plan stage did not return a JSON object.
        """
        started = time.monotonic()
        stage = STAGE_PLAN
        await self._emit("pipeline_started", {
            "prompt": prompt,
            "has_existing_code": bool(existing_code),
            "model": getattr(self._llm, "model", ""),
        })
        try:
            plan = await self.plan(prompt, existing_code)
            logger.info(f"[plan] layout={plan.layout!r} components={list(plan.components)}")
            await self._emit("stage_completed", {"stage": STAGE_PLAN})

            stage = STAGE_GENERATE
            code = await self.generate(plan, existing_code)
            logger.info(f"[generate] {len(code)} chars")
            await self._emit("stage_completed", {"stage": STAGE_GENERATE})

            stage = STAGE_EXPLAIN
            explanation = await self.explain(prompt, existing_code, code)
            await self._emit("stage_completed", {"stage": STAGE_EXPLAIN})
        except GenerationError as exc:
            logger.error(f"[{stage}] Pipeline aborted: {exc}")
            await self._emit("pipeline_failed", {
                "stage": stage,
                "error": type(exc).__name__,
                "message": str(exc),
            })
            raise

        duration_ms = int((time.monotonic() - started) * 1000)
        await self._emit("pipeline_completed", {
            "duration_ms": duration_ms,
            "components": list(plan.components),
        })
        return GenerationResult(plan=plan, code=code, explanation=explanation)

    def describe(self) -> dict[str, Any]:
        return {
            "model": getattr(self._llm, "model", ""),
            "allowed_components": self.allowed,
        }
