"""Tests for uigen/studio.py — the single-writer session driver."""

import asyncio
import json

import httpx
import pytest

from uigen.api.main import create_app
from uigen.client import UIGenClient, UIGenClientError
from uigen.core.session import GENERIC_FAILURE_NOTICE
from uigen.exceptions import EmptyPromptError, PlanParseError, RequestInProgressError
from uigen.pipeline import UIPipeline
from uigen.studio import PipelineBackend, RemoteBackend, Studio
from uigen.types import GenerationResult, Plan

ALLOWED = ["Card", "Input", "Button"]


class ScriptedBackend:
    """Returns scripted GenerationResults (or raises scripted exceptions) in order."""
    def __init__(self, items):
        self._items = list(items)
        self.calls = []

    async def generate(self, prompt, existing_code):
        self.calls.append((prompt, existing_code))
        item = self._items.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def _result(code, explanation="", layout="stack"):
    return GenerationResult(plan=Plan(layout=layout, components=["Card"]), code=code, explanation=explanation)


@pytest.mark.asyncio
class TestStudioGenerate:

    async def test_first_generation(self, config, fake_llm_factory, login_responses, login_code):
        pipeline = UIPipeline(llm_client=fake_llm_factory(login_responses), config=config)
        studio = Studio(PipelineBackend(pipeline), ALLOWED)

        update = await studio.generate("add a login card")

        assert update.accepted
        assert studio.state.code == login_code
        assert len(studio.state.history) == 0
        assert studio.state.pending is False

    async def test_passes_current_code_as_existing(self):
        backend = ScriptedBackend([_result("<Card>1</Card>"), _result("<Card>2</Card>")])
        studio = Studio(backend, ALLOWED)
        await studio.generate("first")
        await studio.generate("second")
        assert backend.calls == [("first", None), ("second", "<Card>1</Card>")]

    async def test_blank_prompt_makes_no_request(self):
        backend = ScriptedBackend([])
        studio = Studio(backend, ALLOWED)
        with pytest.raises(EmptyPromptError):
            await studio.generate("   ")
        assert backend.calls == []
        assert studio.state.pending is False

    async def test_hallucinated_component_keeps_state(self):
        backend = ScriptedBackend([_result("<Card><Input/></Card>", "first"), _result("<Card><Widget/></Card>", "bad")])
        studio = Studio(backend, ALLOWED)
        await studio.generate("a card with an input")
        before = studio.state

        update = await studio.generate("add a widget")

        assert not update.accepted
        assert update.notice == "⚠ Invalid component detected. Only Card, Input, and Button are allowed."
        assert studio.state.code == before.code
        assert studio.state.explanation == before.explanation
        assert studio.state.plan == before.plan
        assert len(studio.state.history) == 0

    async def test_pipeline_error_gives_generic_notice(self, config, fake_llm_factory):
        pipeline = UIPipeline(llm_client=fake_llm_factory(["not json"]), config=config)
        studio = Studio(PipelineBackend(pipeline), ALLOWED)
        update = await studio.generate("add a login card")
        assert not update.accepted
        assert update.notice == GENERIC_FAILURE_NOTICE
        assert studio.state.code == ""
        assert studio.state.pending is False

    async def test_client_error_gives_generic_notice(self):
        studio = Studio(ScriptedBackend([UIGenClientError(500, "Error generating UI")]), ALLOWED)
        update = await studio.generate("add a login card")
        assert update.notice == GENERIC_FAILURE_NOTICE

    async def test_unexpected_error_clears_pending_and_propagates(self):
        studio = Studio(ScriptedBackend([KeyError("boom")]), ALLOWED)
        with pytest.raises(KeyError):
            await studio.generate("add a login card")
        assert studio.state.pending is False

    async def test_concurrent_submission_rejected(self):
        release = asyncio.Event()

        class SlowBackend:
            async def generate(self, prompt, existing_code):
                await release.wait()
                return _result("<Card/>")

        studio = Studio(SlowBackend(), ALLOWED)
        first = asyncio.create_task(studio.generate("one"))
        await asyncio.sleep(0)
        with pytest.raises(RequestInProgressError):
            await studio.generate("two")
        release.set()
        update = await first
        assert update.accepted
        assert studio.state.pending is False


@pytest.mark.asyncio
class TestStudioUndo:

    async def test_undo_restores_previous_version(self):
        backend = ScriptedBackend([_result("line1\nline2", "one"), _result("line1\nline3", "two")])
        studio = Studio(backend, ALLOWED)
        await studio.generate("first")
        await studio.generate("second")
        diff = studio.state.last_diff

        assert studio.undo() is True
        assert studio.state.code == "line1\nline2"
        assert studio.state.explanation == "one"
        assert studio.state.last_diff == diff
        assert studio.undo() is False

    async def test_undo_on_fresh_session(self):
        studio = Studio(ScriptedBackend([]), ALLOWED)
        assert studio.undo() is False


@pytest.mark.asyncio
async def test_remote_backend_end_to_end(config, fake_llm_factory, login_plan):
    """Studio → UIGenClient → FastAPI app → UIPipeline, with a hallucination on the second turn."""
    llm = fake_llm_factory([
        json.dumps(login_plan), "```jsx\n<Card><Input/></Card>\n```", "first",
        json.dumps(login_plan), "<Card><Widget/></Card>", "second",
    ])
    app = create_app(config, pipeline=UIPipeline(llm_client=llm, config=config))
    async with UIGenClient(base_url="http://uigen.test", transport=httpx.ASGITransport(app=app)) as client:
        studio = Studio(RemoteBackend(client), ALLOWED)
        first = await studio.generate("add a login card")
        second = await studio.generate("add a widget")

    assert first.accepted
    assert studio.state.code == "<Card><Input/></Card>"
    assert not second.accepted
    assert second.rejected_component == "Widget"
    assert studio.state.code == "<Card><Input/></Card>"


@pytest.mark.asyncio
@pytest.mark.parametrize("response", [
    httpx.Response(200, text="<html>proxy page</html>"),
    httpx.Response(200, json={"plan": {"components": 5}, "code": "<Card/>", "explanation": ""}),
])
async def test_remote_malformed_response_gives_generic_notice(response):
    transport = httpx.MockTransport(lambda request: response)
    async with UIGenClient(base_url="http://uigen.test", transport=transport) as client:
        studio = Studio(RemoteBackend(client), ALLOWED)
        update = await studio.generate("add a card")

    assert not update.accepted
    assert update.notice == GENERIC_FAILURE_NOTICE
    assert studio.state.code == ""
    assert studio.state.pending is False
