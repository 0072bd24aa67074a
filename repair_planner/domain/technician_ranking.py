"""
Technician Ranking

Picks the preferred technician for a repair from the available candidates.
Deterministic: no AI involved.
"""

from typing import Iterable, Optional, Sequence

from repair_planner.domain.models import Technician


def skill_match_count(technician: Technician, required: set[str]) -> int:
    """Count the technician's skills found in the (lower-cased) required set."""
    return sum(1 for skill in technician.skills if skill.lower() in required)


def select_best_technician(
    candidates: Sequence[Technician],
    required_skills: Iterable[str],
) -> Optional[Technician]:
    """
    Select the most qualified technician.

    Highest number of matching skills wins. Ties go to the name that sorts
    first. Returns None when there are no candidates.
    """
    if not candidates:
        return None

    required = {skill.lower() for skill in required_skills}

    return min(
        candidates,
        key=lambda t: (-skill_match_count(t, required), t.name),
    )
