"""
Fault Mapping

Maps a fault type to the technician skills and part numbers a repair needs.
The table lives in data/fault_mappings.yaml and is loaded once; lookups
never fail.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

import yaml

DEFAULT_SKILLS: tuple[str, ...] = ("general_maintenance",)
DEFAULT_PARTS: tuple[str, ...] = ()

DEFAULT_MAPPING_PATH = Path(__file__).resolve().parent.parent / "data" / "fault_mappings.yaml"


def _freeze(table: Mapping[str, Sequence[str]]) -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType({
        key.strip().lower(): tuple(values or ())
        for key, values in table.items()
    })


class FaultMapping:
    """
    Read-only fault type -> requirements table.

    Lookup is a case-insensitive exact match on the trimmed fault type.
    """

    def __init__(
        self,
        skills: Mapping[str, Sequence[str]],
        parts: Mapping[str, Sequence[str]],
    ):
        self._skills = _freeze(skills)
        self._parts = _freeze(parts)

    @classmethod
    def from_file(cls, file_path: Path) -> "FaultMapping":
        """Load the mapping table from a YAML file."""
        with open(file_path, "r") as f:
            data = yaml.safe_load(f) or {}

        faults = data.get("faults") or {}
        skills = {name: entry.get("skills") or [] for name, entry in faults.items()}
        parts = {name: entry.get("parts") or [] for name, entry in faults.items()}
        return cls(skills, parts)

    def skills_for(self, fault_type: Optional[str]) -> tuple[str, ...]:
        key = _lookup_key(fault_type)
        if key is None:
            return DEFAULT_SKILLS
        return self._skills.get(key, DEFAULT_SKILLS)

    def parts_for(self, fault_type: Optional[str]) -> tuple[str, ...]:
        key = _lookup_key(fault_type)
        if key is None:
            return DEFAULT_PARTS
        return self._parts.get(key, DEFAULT_PARTS)

    def known_fault_types(self) -> list[str]:
        return sorted(self._skills)


def _lookup_key(fault_type: Optional[str]) -> Optional[str]:
    if not fault_type or not fault_type.strip():
        return None
    return fault_type.strip().lower()


# Process-wide mapping, loaded on first use
_mapping: Optional[FaultMapping] = None


def get_fault_mapping() -> FaultMapping:
    """Get the packaged fault mapping."""
    global _mapping
    if _mapping is None:
        _mapping = FaultMapping.from_file(DEFAULT_MAPPING_PATH)
    return _mapping

