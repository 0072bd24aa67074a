"""
Planning Agent Client

Wraps the chat model that drafts work orders. The agent is a fixed
definition (name, model, instructions) registered once per process;
registering an unchanged definition again keeps the current version.
"""

from dataclasses import dataclass
import hashlib
import logging
from typing import Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_core.output_parsers import StrOutputParser
from langchain_core.runnables import Runnable
from langchain_groq import ChatGroq

from repair_planner.application.prompts import AGENT_INSTRUCTIONS
from repair_planner.exceptions import ConfigurationError
from repair_planner.infrastructure.config import LLMConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AgentDefinition:
    """What identifies one version of the planning agent."""
    name: str
    model: str
    instructions: str

    @property
    def version_id(self) -> str:
        content = "\n".join((self.name, self.model, self.instructions))
        return hashlib.sha256(content.encode("utf-8")).hexdigest()[:12]


class PlannerAgentClient:
    """
    Client for the generative planning agent.

    Registration is local to this process: ensure_version() builds the
    chat chain and derives a content-hash version id. No remote agent
    registry is created or consulted.

    Design:
    - Lazy chat model creation on registration
    - One request/response per invoke, no conversation memory
    - Errors from the provider propagate unchanged
    """

    def __init__(
        self,
        config: Optional[LLMConfig] = None,
        chat_model: Optional[BaseChatModel] = None,
        instructions: str = AGENT_INSTRUCTIONS,
    ):
        self.config = config or LLMConfig.from_env()
        self.instructions = instructions
        self._chat_model = chat_model
        self._owns_chat_model = chat_model is None
        self._chain: Optional[Runnable] = None
        self._version: Optional[str] = None

    @property
    def definition(self) -> AgentDefinition:
        return AgentDefinition(
            name=self.config.agent_name,
            model=self.config.model,
            instructions=self.instructions,
        )

    @property
    def version(self) -> Optional[str]:
        """Currently registered version, None before registration."""
        return self._version

    def ensure_version(self) -> str:
        """
        Register the agent definition if it is not already current.

        Safe to call repeatedly.

        Returns:
            The registered version id
        """
        definition = self.definition
        if self._chain is not None and self._version == definition.version_id:
            logger.info("Agent '%s' already at version %s.", definition.name, self._version)
            return self._version

        logger.info(
            "Creating agent '%s' with model '%s'.", definition.name, definition.model
        )
        if self._owns_chat_model:
            self._chat_model = self._create_chat_model()

        self._chain = self._chat_model | StrOutputParser()
        self._version = definition.version_id
        logger.info("Agent version: %s.", self._version)
        return self._version

    def _create_chat_model(self) -> BaseChatModel:
        if not self.config.api_key:
            raise ConfigurationError(["GROQ_API_KEY"])

        return ChatGroq(
            model=self.config.model,
            api_key=self.config.api_key,
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
        )

    async def invoke(self, prompt: str) -> str:
        """
        Send one planning request and return the raw text answer.

        Args:
            prompt: Planning request built for a single fault

        Returns:
            Agent output, expected to contain a JSON work order
        """
        if self._chain is None:
            self.ensure_version()

        messages = [
            SystemMessage(content=self.instructions),
            HumanMessage(content=prompt),
        ]

        logger.info("Invoking agent '%s'.", self.config.agent_name)
        try:
            text = await self._chain.ainvoke(
                messages,
                config={"run_name": self.config.agent_name},
            )
        except Exception:
            logger.exception("Agent '%s' invocation failed.", self.config.agent_name)
            raise

        return text or ""


def create_planner_agent_client(config: Optional[LLMConfig] = None) -> PlannerAgentClient:
    """Factory function to create the planning agent client."""
    return PlannerAgentClient(config or LLMConfig.from_env())
