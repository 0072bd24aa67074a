"""
Infrastructure Layer

External services and adapters: configuration, the MongoDB document store,
the planning agent client and LangSmith tracing.
"""

from repair_planner.infrastructure.config import (
    AppConfig,
    LangSmithConfig,
    LLMConfig,
    MongoConfig,
    get_config,
    reload_config,
)
from repair_planner.infrastructure.document_store import MongoDocumentStore, create_document_store
from repair_planner.infrastructure.llm_client import PlannerAgentClient, create_planner_agent_client
