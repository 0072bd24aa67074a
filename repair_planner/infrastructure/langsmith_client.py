"""
LangSmith Observability Integration

LangChain and LangGraph runs are traced by LangSmith whenever the tracing
environment is set. This module derives that environment from AppConfig.
"""

import logging
import os
from typing import Optional

from repair_planner.infrastructure.config import LangSmithConfig

logger = logging.getLogger(__name__)


def configure_langsmith(config: Optional[LangSmithConfig] = None) -> bool:
    """
    Enable or disable LangSmith tracing for this process.

    Environment variables:
        LANGCHAIN_API_KEY: LangSmith API key
        LANGCHAIN_PROJECT: Project name (default: repair-planner)
        LANGCHAIN_TRACING: Enable tracing (default: false)

    Returns:
        True if tracing is enabled
    """
    config = config or LangSmithConfig.from_env()

    if not config.enabled:
        os.environ["LANGSMITH_TRACING"] = "false"
        logger.info("LangSmith tracing disabled.")
        return False

    if not config.api_key:
        os.environ["LANGSMITH_TRACING"] = "false"
        logger.warning("LangSmith API key not found - tracing disabled.")
        return False

    os.environ["LANGSMITH_TRACING"] = "true"
    os.environ["LANGSMITH_API_KEY"] = config.api_key
    os.environ["LANGSMITH_PROJECT"] = config.project_name
    os.environ["LANGSMITH_ENDPOINT"] = config.endpoint
    logger.info("LangSmith tracing enabled for project '%s'.", config.project_name)
    return True
