"""Test fixtures: fake LLM client, test config, scripted pipeline responses.

All tests should use these fixtures for consistency.
"""

import json

import pytest

from uigen.config import UIGenConfig
from uigen.pipeline import UIPipeline


LOGIN_PLAN = {
    "layout": "centered",
    "components": ["Card", "Input", "Button"],
    "description": "login form",
}

LOGIN_CODE = """<Card>
  <Input placeholder="Email" />
  <Input placeholder="Password" />
  <Button label="Log in" />
</Card>"""

LOGIN_EXPLANATION = "Created a centered card with email and password inputs and a login button."


@pytest.fixture
def config():
    """Test configuration with safe defaults."""
    return UIGenConfig(
        debug=True,
        default_llm_model="mock/test-model",
        llm_api_key="test-key",
        llm_timeout_seconds=5.0,
    )


@pytest.fixture
def small_allowed():
    """The original three-component whitelist."""
    return ["Card", "Input", "Button"]


# ── Fake LLM client ───────────────────────────────────────────────────────────

class FakeLLMClient:
    """Returns scripted responses in order without hitting any LLM API.

    Each scripted item is either completion text or an exception instance,
    which is raised instead of returning. Every call is recorded in `calls`.
    """
    def __init__(self, responses: list, model: str = "mock/test-model"):
        self._responses = list(responses)
        self.model = model
        self.calls: list[dict] = []

    async def complete(self, messages, **kwargs) -> dict:
        self.calls.append({"messages": messages, **kwargs})
        if not self._responses:
            raise AssertionError("FakeLLMClient ran out of scripted responses")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return {
            "content": item,
            "usage": {"input_tokens": 5, "output_tokens": 5},
        }


@pytest.fixture
def fake_llm_factory():
    return FakeLLMClient


@pytest.fixture
def login_responses():
    """Plan, code and explanation for scenario "add a login card"."""
    return [json.dumps(LOGIN_PLAN), LOGIN_CODE, LOGIN_EXPLANATION]


@pytest.fixture
def login_pipeline(config, login_responses):
    llm = FakeLLMClient(login_responses)
    return UIPipeline(llm_client=llm, config=config)


@pytest.fixture
def login_plan():
    return dict(LOGIN_PLAN)


@pytest.fixture
def login_code():
    return LOGIN_CODE


@pytest.fixture
def login_explanation():
    return LOGIN_EXPLANATION
