from datetime import datetime, timezone

import pytest

from repair_planner.domain.models import DiagnosedFault, Part, Technician


@pytest.fixture
def curing_fault() -> DiagnosedFault:
    return DiagnosedFault(
        id="fault-001",
        machine_id="TCP-01",
        fault_type="curing_temperature_excessive",
        severity="high",
        description="Temperature exceeds target by 25C during curing cycle.",
        detected_at_utc=datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc),
        confidence=0.92,
    )


@pytest.fixture
def technicians() -> list[Technician]:
    return [
        Technician(id="T1", name="Ana", skills=["instrumentation"], is_available=True),
        Technician(
            id="T2",
            name="Ben",
            skills=["instrumentation", "plc_troubleshooting"],
            is_available=True,
        ),
    ]


@pytest.fixture
def heater_part() -> Part:
    return Part(
        id="part-001",
        part_number="TCP-HTR-4KW",
        name="Curing Press Heater Element 4kW",
        category="heating",
        quantity_available=4,
        unit_of_measure="ea",
        location="Warehouse A-12",
    )
