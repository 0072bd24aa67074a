"""
Planner Prompts

System instructions registered with the planning agent, and the per-fault
planning request. The agent has no other view of the plant: every input it
needs to choose a technician and parts is spelled out here.
"""

from typing import Optional, Sequence

from repair_planner.domain.models import DiagnosedFault, Part, Technician

AGENT_INSTRUCTIONS = """You are a Repair Planner Agent for tire manufacturing equipment.
Generate a repair plan with tasks, timeline, and resource allocation.
Return the response as valid JSON matching the WorkOrder schema.

Output JSON with these fields:
- workOrderNumber, machineId, title, description
- type: "corrective" | "preventive" | "emergency"
- priority: "critical" | "high" | "medium" | "low"
- status, assignedTo (technician id or null), notes
- estimatedDuration: integer (minutes, e.g. 60 not "60 minutes")
- partsUsed: [{ partId, partNumber, quantity }]
- tasks: [{ sequence, title, description, estimatedDurationMinutes (integer), requiredSkills, safetyNotes }]

IMPORTANT: All duration fields must be integers representing minutes (e.g. 90), not strings.

Rules:
- Assign the most qualified available technician
- Include only relevant parts; empty array if none needed
- Tasks must be ordered and actionable

Return ONLY the JSON, no other text."""

NO_TECHNICIANS = "No technicians available."
NO_PARTS = "No parts found."
NO_PREFERRED_TECHNICIAN = "None"


def _join(values: Sequence[str]) -> str:
    return ", ".join(values)


def format_technicians(technicians: Sequence[Technician]) -> str:
    if not technicians:
        return NO_TECHNICIANS
    return "\n".join(
        f"- id: {t.id}, name: {t.name}, skills: [{_join(t.skills)}], available: {t.is_available}"
        for t in technicians
    )


def format_parts(parts: Sequence[Part]) -> str:
    if not parts:
        return NO_PARTS
    return "\n".join(
        f"- id: {p.id}, partNumber: {p.part_number}, name: {p.name}, qty: {p.quantity_available}"
        for p in parts
    )


def format_preferred(technician: Optional[Technician]) -> str:
    if technician is None:
        return NO_PREFERRED_TECHNICIAN
    return f"{technician.id} ({technician.name})"


def build_prompt(
    fault: DiagnosedFault,
    required_skills: Sequence[str],
    required_parts: Sequence[str],
    technicians: Sequence[Technician],
    parts: Sequence[Part],
    preferred_technician: Optional[Technician],
) -> str:
    """Render the planning request for one diagnosed fault."""
    detected_at = fault.detected_at_utc.isoformat() if fault.detected_at_utc else ""
    confidence = "" if fault.confidence is None else f"{fault.confidence}"

    return f"""Diagnosed fault:
- machineId: {fault.machine_id}
- faultType: {fault.fault_type}
- severity: {fault.severity}
- description: {fault.description or ""}
- detectedAtUtc: {detected_at}
- confidence: {confidence}

Required skills: [{_join(required_skills)}]
Required parts (part numbers): [{_join(required_parts)}]

Available technicians:
{format_technicians(technicians)}

Parts inventory:
{format_parts(parts)}

Preferred technician (most qualified available): {format_preferred(preferred_technician)}

Generate a work order JSON that matches the schema in your instructions.
"""
