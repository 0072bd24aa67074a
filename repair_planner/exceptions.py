"""
Repair Planner Exceptions

Error taxonomy for the planning pipeline. External-call failures (MongoDB,
LangChain/Groq) are not wrapped: they propagate as the client library raised
them. Only failures the pipeline itself detects get a type here.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Discriminates planner failures for callers."""

    CONFIGURATION = "configuration"
    EMPTY_AGENT_RESPONSE = "empty_agent_response"
    MALFORMED_AGENT_OUTPUT = "malformed_agent_output"


class RepairPlannerError(Exception):
    """Base class for all errors raised by the planner itself."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(RepairPlannerError):
    """A required setting is missing. Fatal at startup."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        names = ", ".join(f"'{name}'" for name in self.missing)
        super().__init__(
            f"Required environment variable(s) not set: {names}.",
            ErrorKind.CONFIGURATION,
            {"missing": self.missing},
        )


class AgentResponseError(RepairPlannerError):
    """
    The planning agent answered, but the answer is unusable.

    Distinct from the agent being unreachable, which surfaces as the
    client library's own exception.
    """


class EmptyAgentResponseError(AgentResponseError):
    """No JSON object could be located in the agent output."""

    def __init__(self, raw_text: str = "") -> None:
        super().__init__(
            "Agent returned an empty response.",
            ErrorKind.EMPTY_AGENT_RESPONSE,
            {"raw_text": raw_text},
        )


class InvalidWorkOrderError(AgentResponseError):
    """The extracted JSON does not deserialize into a work order."""

    def __init__(self, reason: str, payload: str) -> None:
        self.payload = payload
        super().__init__(
            f"Agent returned invalid work order JSON: {reason}",
            ErrorKind.MALFORMED_AGENT_OUTPUT,
            {"payload": payload},
        )
