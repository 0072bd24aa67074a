"""
Agent Response Parsing

The agent is asked for bare JSON but may wrap it in a code fence or surround
it with commentary. extract_json is a heuristic, not a parser: it finds the
outermost-looking object and leaves validation to parse_work_order.
"""

import json
import logging

from pydantic import ValidationError

from repair_planner.domain.models import WorkOrder
from repair_planner.exceptions import InvalidWorkOrderError

logger = logging.getLogger(__name__)

FENCE = "```"


def extract_json(text: str) -> str:
    """
    Locate the JSON object in raw agent output.

    Returns an empty string when no {...} span exists.
    """
    if not text or not text.strip():
        return ""

    trimmed = text.strip()
    if trimmed.startswith(FENCE):
        # Drop the opening fence line (and its language tag)
        first_newline = trimmed.find("\n")
        if first_newline >= 0:
            trimmed = trimmed[first_newline + 1:]

        last_fence = trimmed.rfind(FENCE)
        if last_fence >= 0:
            trimmed = trimmed[:last_fence]

    trimmed = trimmed.strip()
    if trimmed.startswith("{") and trimmed.endswith("}"):
        return trimmed

    start = trimmed.find("{")
    end = trimmed.rfind("}")
    if start >= 0 and end > start:
        return trimmed[start:end + 1]
    return ""


def parse_work_order(json_text: str) -> WorkOrder:
    """
    Deserialize extracted agent JSON into a WorkOrder.

    Raises:
        InvalidWorkOrderError: payload is not a JSON object of the right shape
    """
    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse work order JSON from agent: %s", e)
        raise InvalidWorkOrderError(str(e), json_text) from e

    if not isinstance(data, dict):
        logger.error("Agent JSON is a %s, not an object.", type(data).__name__)
        raise InvalidWorkOrderError(
            f"expected a JSON object, got {type(data).__name__}", json_text
        )

    try:
        return WorkOrder.model_validate(data)
    except ValidationError as e:
        logger.error("Agent JSON does not match the work order schema: %s", e)
        raise InvalidWorkOrderError(str(e), json_text) from e
