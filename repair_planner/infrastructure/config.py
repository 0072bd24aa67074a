"""
Configuration Module

Centralized configuration management for the repair planner.
Values come from the environment, with a .env file loaded first.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from repair_planner.exceptions import ConfigurationError

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class LLMConfig:
    """Planning agent (LLM provider) configuration."""
    provider: str = "groq"
    model: str = "llama-3.3-70b-versatile"
    api_key: Optional[str] = None
    temperature: float = 0.1
    max_tokens: int = 2048
    agent_name: str = "RepairPlannerAgent"

    @classmethod
    def from_env(cls) -> "LLMConfig":
        return cls(
            provider=os.getenv("LLM_PROVIDER", "groq"),
            model=os.getenv("LLM_MODEL", "llama-3.3-70b-versatile"),
            api_key=os.getenv("GROQ_API_KEY") or None,
            temperature=float(os.getenv("LLM_TEMPERATURE", "0.1")),
            max_tokens=int(os.getenv("LLM_MAX_TOKENS", "2048")),
            agent_name=os.getenv("AGENT_NAME", "RepairPlannerAgent"),
        )


@dataclass
class MongoConfig:
    """Document store configuration."""
    uri: Optional[str] = None
    database: Optional[str] = None
    technicians_collection: str = "technicians"
    parts_collection: str = "partsInventory"
    work_orders_collection: str = "workOrders"

    @classmethod
    def from_env(cls) -> "MongoConfig":
        return cls(
            uri=os.getenv("MONGODB_URI") or None,
            database=os.getenv("MONGODB_DATABASE") or None,
            technicians_collection=os.getenv("MONGODB_TECHNICIANS_COLLECTION", "technicians"),
            parts_collection=os.getenv("MONGODB_PARTS_COLLECTION", "partsInventory"),
            work_orders_collection=os.getenv("MONGODB_WORK_ORDERS_COLLECTION", "workOrders"),
        )


@dataclass
class LangSmithConfig:
    """LangSmith tracing configuration."""
    api_key: Optional[str] = None
    project_name: str = "repair-planner"
    endpoint: str = "https://api.smith.langchain.com"
    enabled: bool = False

    @classmethod
    def from_env(cls) -> "LangSmithConfig":
        return cls(
            api_key=os.getenv("LANGCHAIN_API_KEY") or None,
            project_name=os.getenv("LANGCHAIN_PROJECT", "repair-planner"),
            endpoint=os.getenv("LANGCHAIN_ENDPOINT", "https://api.smith.langchain.com"),
            enabled=_env_flag("LANGCHAIN_TRACING"),
        )


@dataclass
class AppConfig:
    """Main application configuration."""
    debug: bool = False
    log_level: str = "INFO"

    # Sub-configurations
    llm: LLMConfig = field(default_factory=LLMConfig.from_env)
    mongo: MongoConfig = field(default_factory=MongoConfig.from_env)
    langsmith: LangSmithConfig = field(default_factory=LangSmithConfig.from_env)

    @classmethod
    def from_env(cls) -> "AppConfig":
        return cls(
            debug=_env_flag("DEBUG"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            llm=LLMConfig.from_env(),
            mongo=MongoConfig.from_env(),
            langsmith=LangSmithConfig.from_env(),
        )

    def missing_settings(self) -> list[str]:
        """Names of required environment variables that are not set."""
        required = {
            "GROQ_API_KEY": self.llm.api_key,
            "LLM_MODEL": self.llm.model,
            "MONGODB_URI": self.mongo.uri,
            "MONGODB_DATABASE": self.mongo.database,
        }
        return [name for name, value in required.items() if not value or not value.strip()]

    def validate(self) -> "AppConfig":
        """
        Check required settings.

        Raises:
            ConfigurationError: listing every missing variable
        """
        missing = self.missing_settings()
        if missing:
            raise ConfigurationError(missing)
        return self


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reload_config() -> AppConfig:
    """Reload configuration from environment."""
    global _config
    _config = AppConfig.from_env()
    return _config
