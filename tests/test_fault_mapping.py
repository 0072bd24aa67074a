"""Tests for the fault type -> requirements table."""

from pathlib import Path

import pytest

from repair_planner.domain.fault_mapping import (
    DEFAULT_PARTS,
    DEFAULT_SKILLS,
    FaultMapping,
    get_fault_mapping,
)

KNOWN_FAULT_TYPES = [
    "curing_temperature_excessive",
    "curing_cycle_time_deviation",
    "building_drum_vibration",
    "ply_tension_excessive",
    "extruder_barrel_overheating",
    "low_material_throughput",
    "high_radial_force_variation",
    "load_cell_drift",
    "mixing_temperature_excessive",
    "excessive_mixer_vibration",
]


def skills_for(fault_type):
    return get_fault_mapping().skills_for(fault_type)


def parts_for(fault_type):
    return get_fault_mapping().parts_for(fault_type)


def test_packaged_table_lists_every_known_fault_type():
    assert get_fault_mapping().known_fault_types() == sorted(KNOWN_FAULT_TYPES)


def test_curing_temperature_requirements():
    assert skills_for("curing_temperature_excessive") == (
        "tire_curing_press",
        "temperature_control",
        "instrumentation",
        "electrical_systems",
        "plc_troubleshooting",
        "mold_maintenance",
    )
    assert parts_for("curing_temperature_excessive") == ("TCP-HTR-4KW", "GEN-TS-K400")


def test_excessive_mixer_vibration_requirements():
    assert "vibration_analysis" in skills_for("excessive_mixer_vibration")
    assert parts_for("excessive_mixer_vibration") == ("BMX-BRG-22320", "BMX-SEAL-DP")


def test_radial_force_variation_needs_no_parts():
    assert parts_for("high_radial_force_variation") == ()
    assert "tire_uniformity_machine" in skills_for("high_radial_force_variation")


@pytest.mark.parametrize("fault_type", KNOWN_FAULT_TYPES)
def test_every_known_fault_type_has_skills(fault_type):
    assert skills_for(fault_type)
    assert skills_for(fault_type) != DEFAULT_SKILLS


def test_lookup_ignores_case_and_surrounding_whitespace():
    assert skills_for("  Curing_Temperature_EXCESSIVE ") == skills_for("curing_temperature_excessive")
    assert parts_for("LOAD_CELL_DRIFT") == ("TUM-LC-2KN", "TUM-ENC-5000")


@pytest.mark.parametrize("fault_type", [None, "", "   ", "unknown_fault", "curing"])
def test_unknown_or_blank_fault_type_falls_back_to_defaults(fault_type):
    assert skills_for(fault_type) == ("general_maintenance",)
    assert parts_for(fault_type) == ()
    assert DEFAULT_PARTS == ()


def test_from_file_reads_yaml(tmp_path: Path):
    table = tmp_path / "mapping.yaml"
    table.write_text(
        "faults:\n"
        "  Belt_Slip:\n"
        "    skills: [conveyor_systems]\n"
        "    parts: [CNV-BELT-01]\n"
        "  sensor_noise:\n"
        "    skills: [instrumentation]\n"
    )

    mapping = FaultMapping.from_file(table)

    assert mapping.known_fault_types() == ["belt_slip", "sensor_noise"]
    assert mapping.skills_for("belt_slip") == ("conveyor_systems",)
    assert mapping.parts_for("BELT_SLIP") == ("CNV-BELT-01",)
    assert mapping.parts_for("sensor_noise") == ()


def test_mapping_is_read_only():
    mapping = FaultMapping({"a": ["x"]}, {"a": ["P-1"]})

    with pytest.raises(TypeError):
        mapping._skills["b"] = ("y",)
