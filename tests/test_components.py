"""Tests for uigen/components.py and uigen/callbacks/logging.py."""

import json
import logging

import pytest

from uigen.callbacks.logging import LoggingCallback
from uigen.components import (
    DEFAULT_COMPONENTS,
    build_component_context,
    component_names,
    format_component_list,
    get_component,
)


def test_catalog_names():
    assert component_names() == [
        "Card", "Input", "Button", "Navbar", "Sidebar", "Table", "Modal", "Chart",
    ]
    assert len(DEFAULT_COMPONENTS) == 8


def test_get_component():
    assert list(get_component("Button").props) == ["label", "onClick"]
    assert get_component("Widget") is None


def test_format_component_list():
    assert format_component_list(["Card"]) == "Card"
    assert format_component_list(["Card", "Input"]) == "Card and Input"
    assert format_component_list(["Card", "Input", "Button"]) == "Card, Input, and Button"
    assert format_component_list([]) == ""


def test_component_context_is_json():
    items = json.loads(build_component_context(["Card", "Input"]))
    assert [item["name"] for item in items] == ["Card", "Input"]
    assert "placeholder" in items[1]["props"]


@pytest.mark.asyncio
class TestLoggingCallback:

    async def test_writes_json_line(self, caplog):
        cb = LoggingCallback()
        with caplog.at_level(logging.INFO, logger="uigen.audit"):
            await cb("stage_completed", {"stage": "plan"})
        record = json.loads(caplog.records[-1].getMessage())
        assert record["event"] == "stage_completed"
        assert record["stage"] == "plan"

    async def test_failure_logged_at_error(self, caplog):
        cb = LoggingCallback()
        with caplog.at_level(logging.INFO, logger="uigen.audit"):
            await cb("pipeline_failed", {"stage": "generate", "error": "UpstreamCallError", "message": "x" * 500})
        rec = caplog.records[-1]
        assert rec.levelno == logging.ERROR
        assert len(json.loads(rec.getMessage())["message"]) <= 200
