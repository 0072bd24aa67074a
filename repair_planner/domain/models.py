"""
Domain Models

Pydantic models for faults, technicians, parts inventory and work orders.

Documents in the store and the agent's JSON use camelCase keys
(machineId, workOrderNumber, ...). Models accept camelCase or snake_case,
match keys case-insensitively, and coerce numeric strings ("90" -> 90).
"""

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


# =============================================================================
# 1. ENUMS
# =============================================================================

class WorkOrderType(str, Enum):
    """Kind of maintenance a work order performs."""
    CORRECTIVE = "corrective"
    PREVENTIVE = "preventive"
    EMERGENCY = "emergency"


class WorkOrderPriority(str, Enum):
    """Work order urgency."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# =============================================================================
# 2. BASE MODEL
# =============================================================================

class PlannerModel(BaseModel):
    """Base for all documents exchanged with the store and the agent."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def match_keys_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        lookup = {}
        for name, info in cls.model_fields.items():
            alias = info.alias or name
            lookup[name.lower()] = alias
            lookup[alias.lower()] = alias

        return {
            (lookup.get(key.lower(), key) if isinstance(key, str) else key): value
            for key, value in data.items()
        }

    def to_document(self) -> dict:
        """Serialize with camelCase keys, keeping datetimes native."""
        return self.model_dump(by_alias=True)

    def to_json_dict(self) -> dict:
        """Serialize with camelCase keys and JSON-safe values."""
        return self.model_dump(by_alias=True, mode="json")

    @classmethod
    def from_document(cls, document: dict):
        return cls.model_validate(document)


# =============================================================================
# 3. INPUT AND INVENTORY MODELS
# =============================================================================

class DiagnosedFault(PlannerModel):
    """A fault diagnosed upstream. Never mutated by the planner."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default="", description="Fault identifier")
    machine_id: str = Field(default="", description="Machine the fault was detected on")
    fault_type: str = Field(default="", description="Key into the fault mapping table")
    severity: str = Field(default="", description="Severity label, e.g. high")
    description: Optional[str] = Field(None, description="Free-text description")
    detected_at_utc: Optional[datetime] = Field(None)
    confidence: Optional[float] = Field(None, ge=0, le=1)


class Technician(PlannerModel):
    """Snapshot of a technician document."""
    id: str = Field(...)
    name: str = Field(default="")
    skills: List[str] = Field(default_factory=list)
    is_available: bool = Field(default=False)

    @field_validator("skills", mode="before")
    @classmethod
    def null_skills_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class Part(PlannerModel):
    """Snapshot of a parts inventory document."""
    id: str = Field(...)
    part_number: str = Field(default="")
    name: str = Field(default="")
    category: str = Field(default="")
    quantity_available: int = Field(default=0)
    unit_of_measure: Optional[str] = Field(None)
    location: Optional[str] = Field(None)


# =============================================================================
# 4. WORK ORDER MODELS
# =============================================================================

class WorkOrderPartUsage(PlannerModel):
    """Part line item on a work order."""
    part_id: Optional[str] = Field(None)
    part_number: Optional[str] = Field(None)
    quantity: int = Field(default=0)


class RepairTask(PlannerModel):
    """One ordered step of a repair plan."""
    sequence: int = Field(default=0)
    title: Optional[str] = Field(None)
    description: Optional[str] = Field(None)
    estimated_duration_minutes: int = Field(default=0)
    required_skills: List[str] = Field(default_factory=list)
    safety_notes: Optional[str] = Field(None)

    @field_validator("required_skills", mode="before")
    @classmethod
    def null_skills_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class WorkOrder(PlannerModel):
    """
    Repair work order.

    Fields the normalizer may fill are Optional; None means "unset".
    assigned_to distinguishes None (unset) from "" (explicitly unassigned).
    """

    model_config = ConfigDict(use_enum_values=True)

    id: Optional[str] = Field(None)
    work_order_number: Optional[str] = Field(None)
    machine_id: Optional[str] = Field(None)
    title: Optional[str] = Field(None)
    description: Optional[str] = Field(None)
    type: Optional[WorkOrderType] = Field(None)
    priority: Optional[WorkOrderPriority] = Field(None)
    status: Optional[str] = Field(None)
    assigned_to: Optional[str] = Field(None, description="Technician id")
    notes: Optional[str] = Field(None)
    estimated_duration: int = Field(default=0, description="Total minutes")
    parts_used: Optional[List[WorkOrderPartUsage]] = Field(None)
    tasks: Optional[List[RepairTask]] = Field(None)
    created_at_utc: Optional[datetime] = Field(None)
    updated_at_utc: Optional[datetime] = Field(None)

    @field_validator("type", "priority", mode="before")
    @classmethod
    def normalize_choice(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower() or None
        return v
