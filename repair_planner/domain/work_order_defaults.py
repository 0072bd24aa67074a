"""
Work Order Defaults

Fills required-but-absent work order fields before persistence. Each rule
runs only when its field is unset, except updated_at_utc which is refreshed
on every call.
"""

from datetime import datetime, timezone
from typing import Optional
import uuid

from repair_planner.domain.models import (
    DiagnosedFault,
    Technician,
    WorkOrder,
    WorkOrderPriority,
    WorkOrderType,
)

DEFAULT_STATUS = "new"


def new_work_order_id() -> str:
    return uuid.uuid4().hex


def work_order_number_for(moment: datetime) -> str:
    """Human-readable number derived from a UTC timestamp."""
    return f"WO-{moment:%Y%m%d%H%M%S}"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def ensure_identity(work_order: WorkOrder, now: Optional[datetime] = None) -> WorkOrder:
    """
    Apply the id, number and timestamp rules only.

    The document store runs this before every write.
    """
    now = now or datetime.now(timezone.utc)

    if _is_blank(work_order.id):
        work_order.id = new_work_order_id()

    if _is_blank(work_order.work_order_number):
        work_order.work_order_number = work_order_number_for(now)

    if work_order.created_at_utc is None:
        work_order.created_at_utc = now

    work_order.updated_at_utc = now
    return work_order


def apply_defaults(
    work_order: WorkOrder,
    fault: DiagnosedFault,
    preferred_technician: Optional[Technician],
    now: Optional[datetime] = None,
) -> WorkOrder:
    """
    Fill every unset field of an agent-drafted work order in place.

    Returns the same object for chaining.
    """
    now = now or datetime.now(timezone.utc)

    if _is_blank(work_order.machine_id):
        work_order.machine_id = fault.machine_id

    if _is_blank(work_order.type):
        work_order.type = WorkOrderType.CORRECTIVE.value

    if _is_blank(work_order.priority):
        work_order.priority = WorkOrderPriority.MEDIUM.value

    if _is_blank(work_order.status):
        work_order.status = DEFAULT_STATUS

    # "" means the agent chose to leave it unassigned
    if work_order.assigned_to is None and preferred_technician is not None:
        work_order.assigned_to = preferred_technician.id

    if work_order.parts_used is None:
        work_order.parts_used = []

    if work_order.tasks is None:
        work_order.tasks = []

    return ensure_identity(work_order, now)
