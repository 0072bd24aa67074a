"""Tests for environment-driven configuration."""

import pytest

from repair_planner.exceptions import ConfigurationError, ErrorKind
from repair_planner.infrastructure.config import (
    AppConfig,
    LangSmithConfig,
    LLMConfig,
    MongoConfig,
    get_config,
    reload_config,
)

REQUIRED = {
    "GROQ_API_KEY": "gsk-test",
    "LLM_MODEL": "llama-3.3-70b-versatile",
    "MONGODB_URI": "mongodb://localhost:27017",
    "MONGODB_DATABASE": "factory",
}


@pytest.fixture
def required_env(monkeypatch):
    for name, value in REQUIRED.items():
        monkeypatch.setenv(name, value)
    return monkeypatch


def test_from_env_reads_every_section(required_env):
    required_env.setenv("LOG_LEVEL", "debug")
    required_env.setenv("LLM_TEMPERATURE", "0.3")
    required_env.setenv("MONGODB_WORK_ORDERS_COLLECTION", "orders")
    required_env.setenv("LANGCHAIN_TRACING", "true")

    config = AppConfig.from_env()

    assert config.log_level == "DEBUG"
    assert config.llm.api_key == "gsk-test"
    assert config.llm.temperature == 0.3
    assert config.mongo.uri == "mongodb://localhost:27017"
    assert config.mongo.database == "factory"
    assert config.mongo.work_orders_collection == "orders"
    assert config.mongo.technicians_collection == "technicians"
    assert config.langsmith.enabled is True


def test_validate_passes_with_required_settings(required_env):
    config = AppConfig.from_env()

    assert config.validate() is config
    assert config.missing_settings() == []


def test_validate_lists_every_missing_setting():
    config = AppConfig(
        llm=LLMConfig(api_key=None, model=""),
        mongo=MongoConfig(uri="mongodb://localhost:27017", database="   "),
        langsmith=LangSmithConfig(),
    )

    with pytest.raises(ConfigurationError) as exc_info:
        config.validate()

    error = exc_info.value
    assert error.missing == ["GROQ_API_KEY", "LLM_MODEL", "MONGODB_DATABASE"]
    assert error.kind == ErrorKind.CONFIGURATION
    assert "'GROQ_API_KEY'" in error.message
    assert error.to_dict()["details"] == {"missing": error.missing}


def test_empty_environment_values_count_as_missing(required_env):
    required_env.setenv("MONGODB_URI", "")

    assert AppConfig.from_env().missing_settings() == ["MONGODB_URI"]


def test_tracing_disabled_by_default(monkeypatch):
    monkeypatch.delenv("LANGCHAIN_TRACING", raising=False)

    assert LangSmithConfig.from_env().enabled is False


def test_reload_config_replaces_global(required_env):
    first = get_config()
    required_env.setenv("AGENT_NAME", "PlannerUnderTest")

    reloaded = reload_config()

    assert reloaded is not first
    assert get_config() is reloaded
    assert reloaded.llm.agent_name == "PlannerUnderTest"
