"""
Repair Planning Workflow

LangGraph pipeline that turns a diagnosed fault into a stored work order:

    map_requirements -> (fetch_technicians | fetch_parts) -> rank_technicians
    -> invoke_agent -> extract_response -> parse_response -> apply_defaults
    -> persist

The graph is linear apart from the two context reads, which run in the same
superstep. Any exception stops the run where it is raised; nothing is
written to the store unless every earlier node succeeded.
"""

from dataclasses import dataclass, field
import logging
from typing import Any, Optional, Protocol, Sequence

from langgraph.graph import END, START, StateGraph
from langsmith import traceable

from repair_planner.application.prompts import build_prompt
from repair_planner.application.response_parser import extract_json, parse_work_order
from repair_planner.domain.fault_mapping import FaultMapping, get_fault_mapping
from repair_planner.domain.models import DiagnosedFault, Part, Technician, WorkOrder
from repair_planner.domain.technician_ranking import select_best_technician
from repair_planner.domain.work_order_defaults import apply_defaults
from repair_planner.exceptions import EmptyAgentResponseError

logger = logging.getLogger(__name__)


# =============================================================================
# COLLABORATORS
# =============================================================================

class DocumentStore(Protocol):
    async def get_available_technicians(self, required_skills: Sequence[str]) -> list[Technician]: ...

    async def get_parts_inventory(self, part_numbers: Sequence[str]) -> list[Part]: ...

    async def create_work_order(self, work_order: WorkOrder) -> WorkOrder: ...


class PlanningAgent(Protocol):
    async def invoke(self, prompt: str) -> str: ...


# =============================================================================
# STATE
# =============================================================================

@dataclass
class PlanningState:
    """State passed between planning nodes."""

    # === INPUT ===
    fault: Optional[DiagnosedFault] = None

    # === REQUIREMENTS ===
    required_skills: list[str] = field(default_factory=list)
    required_parts: list[str] = field(default_factory=list)

    # === CONTEXT ===
    technicians: list[Technician] = field(default_factory=list)
    parts: list[Part] = field(default_factory=list)
    preferred_technician: Optional[Technician] = None

    # === AGENT ===
    prompt: str = ""
    raw_response: str = ""
    json_payload: str = ""

    # === OUTPUT ===
    work_order: Optional[WorkOrder] = None
    saved_work_order: Optional[WorkOrder] = None


# =============================================================================
# PLANNER
# =============================================================================

class RepairPlanner:
    """
    Plans and stores a repair work order for one diagnosed fault.

    Args:
        document_store: Source of technicians/parts and sink for work orders
        agent: Generative planning agent
        fault_mapping: Fault type -> requirements table (packaged table by default)
    """

    def __init__(
        self,
        document_store: DocumentStore,
        agent: PlanningAgent,
        fault_mapping: Optional[FaultMapping] = None,
    ):
        self.document_store = document_store
        self.agent = agent
        self.fault_mapping = fault_mapping or get_fault_mapping()
        self._graph = self.build_graph().compile()

    # -------------------------------------------------------------------------
    # Nodes
    # -------------------------------------------------------------------------

    def map_requirements(self, state: PlanningState) -> dict[str, Any]:
        fault_type = state.fault.fault_type
        return {
            "required_skills": list(self.fault_mapping.skills_for(fault_type)),
            "required_parts": list(self.fault_mapping.parts_for(fault_type)),
        }

    async def fetch_technicians(self, state: PlanningState) -> dict[str, Any]:
        technicians = await self.document_store.get_available_technicians(state.required_skills)
        return {"technicians": list(technicians)}

    async def fetch_parts(self, state: PlanningState) -> dict[str, Any]:
        parts = await self.document_store.get_parts_inventory(state.required_parts)
        return {"parts": list(parts)}

    def rank_technicians(self, state: PlanningState) -> dict[str, Any]:
        best = select_best_technician(state.technicians, state.required_skills)
        logger.info("Preferred technician: %s.", best.id if best else "none")
        return {"preferred_technician": best}

    async def invoke_agent(self, state: PlanningState) -> dict[str, Any]:
        prompt = build_prompt(
            state.fault,
            state.required_skills,
            state.required_parts,
            state.technicians,
            state.parts,
            state.preferred_technician,
        )
        raw_response = await self.agent.invoke(prompt)
        return {"prompt": prompt, "raw_response": raw_response or ""}

    def extract_response(self, state: PlanningState) -> dict[str, Any]:
        payload = extract_json(state.raw_response)
        if not payload.strip():
            logger.error("Agent returned an empty response.")
            raise EmptyAgentResponseError(state.raw_response)
        return {"json_payload": payload}

    def parse_response(self, state: PlanningState) -> dict[str, Any]:
        return {"work_order": parse_work_order(state.json_payload)}

    def fill_defaults(self, state: PlanningState) -> dict[str, Any]:
        work_order = apply_defaults(state.work_order, state.fault, state.preferred_technician)
        return {"work_order": work_order}

    async def persist(self, state: PlanningState) -> dict[str, Any]:
        saved = await self.document_store.create_work_order(state.work_order)
        return {"saved_work_order": saved}

    # -------------------------------------------------------------------------
    # Graph
    # -------------------------------------------------------------------------

    def build_graph(self) -> StateGraph:
        """Build the planning state machine."""
        builder = StateGraph(PlanningState)

        builder.add_node("map_requirements", self.map_requirements)
        builder.add_node("fetch_technicians", self.fetch_technicians)
        builder.add_node("fetch_parts", self.fetch_parts)
        builder.add_node("rank_technicians", self.rank_technicians)
        builder.add_node("invoke_agent", self.invoke_agent)
        builder.add_node("extract_response", self.extract_response)
        builder.add_node("parse_response", self.parse_response)
        builder.add_node("apply_defaults", self.fill_defaults)
        builder.add_node("persist", self.persist)

        builder.add_edge(START, "map_requirements")

        # Independent reads; ranking waits for both
        builder.add_edge("map_requirements", "fetch_technicians")
        builder.add_edge("map_requirements", "fetch_parts")
        builder.add_edge(["fetch_technicians", "fetch_parts"], "rank_technicians")

        builder.add_edge("rank_technicians", "invoke_agent")
        builder.add_edge("invoke_agent", "extract_response")
        builder.add_edge("extract_response", "parse_response")
        builder.add_edge("parse_response", "apply_defaults")
        builder.add_edge("apply_defaults", "persist")
        builder.add_edge("persist", END)

        return builder

    # -------------------------------------------------------------------------
    # Entry point
    # -------------------------------------------------------------------------

    @traceable(run_type="chain", name="plan_and_create_work_order")
    async def plan_and_create_work_order(self, fault: DiagnosedFault) -> WorkOrder:
        """
        Plan a repair for a diagnosed fault and store the resulting work order.

        Raises:
            ValueError: fault is None
            EmptyAgentResponseError: no JSON object in the agent output
            InvalidWorkOrderError: agent JSON is not a valid work order
        Store and agent client errors propagate unchanged.
        """
        if fault is None:
            raise ValueError("fault is required")

        logger.info(
            "Planning repair for %s, fault=%s.", fault.machine_id, fault.fault_type
        )

        result = await self._graph.ainvoke({"fault": fault})
        saved = result["saved_work_order"]

        logger.info("Work order created with id %s.", saved.id)
        return saved
