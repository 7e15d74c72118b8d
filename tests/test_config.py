"""Tests for uigen/config.py."""

import pytest

from uigen.components import component_names
from uigen.config import UIGenConfig
from uigen.exceptions import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    for var in ("GROQ_API_KEY", "UIGEN_LLM_API_KEY", "UIGEN_DEFAULT_LLM_MODEL", "UIGEN_ALLOWED_COMPONENTS", "UIGEN_PORT"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    cfg = UIGenConfig(_env_file=None)
    assert cfg.default_llm_model == "groq/llama-3.1-8b-instant"
    assert cfg.port == 5000
    assert cfg.llm_api_key is None
    assert cfg.allowed_components == component_names()


def test_groq_api_key_is_accepted(clean_env):
    clean_env.setenv("GROQ_API_KEY", "gsk-from-env")
    cfg = UIGenConfig(_env_file=None)
    assert cfg.llm_api_key == "gsk-from-env"
    assert cfg.require_llm_credentials() == "gsk-from-env"


def test_prefixed_api_key_is_accepted(clean_env):
    clean_env.setenv("UIGEN_LLM_API_KEY", "prefixed")
    assert UIGenConfig(_env_file=None).llm_api_key == "prefixed"


def test_prefixed_settings(clean_env):
    clean_env.setenv("UIGEN_DEFAULT_LLM_MODEL", "ollama/llama3")
    clean_env.setenv("UIGEN_PORT", "8080")
    clean_env.setenv("UIGEN_ALLOWED_COMPONENTS", '["Card", "Button"]')
    cfg = UIGenConfig(_env_file=None)
    assert cfg.default_llm_model == "ollama/llama3"
    assert cfg.port == 8080
    assert cfg.allowed_components == ["Card", "Button"]


def test_missing_credentials_raise(clean_env):
    cfg = UIGenConfig(_env_file=None)
    with pytest.raises(ConfigurationError) as exc_info:
        cfg.require_llm_credentials()
    assert "GROQ_API_KEY" in exc_info.value.message
    assert exc_info.value.details["model"] == "groq/llama-3.1-8b-instant"


def test_field_name_can_be_passed_directly(clean_env):
    cfg = UIGenConfig(_env_file=None, llm_api_key="direct")
    assert cfg.require_llm_credentials() == "direct"
