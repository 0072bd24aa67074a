#!/usr/bin/env python3
"""
Seed MongoDB with Sample Technicians and Parts Inventory

Usage:
    python scripts/seed_inventory.py [--reset]
"""

import argparse
import asyncio
import json
from pathlib import Path

# Add project root to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from repair_planner.infrastructure.config import get_config
from repair_planner.infrastructure.document_store import create_document_store


# Technicians covering every fault type in the mapping table
TECHNICIANS = [
    {
        "id": "tech-001",
        "name": "John Smith",
        "skills": [
            "tire_curing_press", "temperature_control", "instrumentation",
            "electrical_systems", "plc_troubleshooting", "mold_maintenance",
            "bladder_replacement", "hydraulic_systems",
        ],
        "isAvailable": True,
    },
    {
        "id": "tech-002",
        "name": "Maria Garcia",
        "skills": [
            "tire_building_machine", "vibration_analysis", "bearing_replacement",
            "alignment", "precision_alignment", "drum_balancing", "mechanical_systems",
            "tension_control", "servo_systems", "sensor_alignment", "plc_programming",
        ],
        "isAvailable": True,
    },
    {
        "id": "tech-003",
        "name": "David Chen",
        "skills": [
            "tire_extruder", "temperature_control", "rubber_processing",
            "screw_maintenance", "instrumentation", "electrical_systems", "motor_drives",
        ],
        "isAvailable": True,
    },
    {
        "id": "tech-004",
        "name": "Aisha Okafor",
        "skills": [
            "tire_uniformity_machine", "data_analysis", "measurement_systems",
            "load_cell_calibration", "sensor_alignment", "instrumentation",
        ],
        "isAvailable": True,
    },
    {
        "id": "tech-005",
        "name": "Lars Nielsen",
        "skills": [
            "banbury_mixer", "temperature_control", "rubber_processing",
            "vibration_analysis", "bearing_replacement", "alignment",
            "mechanical_systems", "preventive_maintenance", "general_maintenance",
        ],
        "isAvailable": False,
    },
    {
        "id": "tech-006",
        "name": "Priya Raman",
        "skills": ["general_maintenance", "electrical_systems", "mechanical_systems"],
        "isAvailable": True,
    },
]

PARTS = [
    ("part-001", "TCP-HTR-4KW", "Curing Press Heater Element 4kW", "heating", 4, "Warehouse A-12"),
    ("part-002", "GEN-TS-K400", "Type K Thermocouple 400C", "sensors", 20, "Warehouse B-03"),
    ("part-003", "TCP-BLD-800", "Curing Bladder 800mm", "consumables", 6, "Warehouse A-14"),
    ("part-004", "TCP-SEAL-200", "Press Cylinder Seal Kit", "seals", 10, "Warehouse A-15"),
    ("part-005", "TBM-BRG-6220", "Drum Bearing 6220", "bearings", 8, "Warehouse C-01"),
    ("part-006", "TBM-LS-500N", "Ply Tension Load Sensor 500N", "sensors", 3, "Warehouse C-04"),
    ("part-007", "TBM-SRV-5KW", "Servo Motor 5kW", "drives", 2, "Warehouse C-06"),
    ("part-008", "EXT-HTR-BAND", "Extruder Barrel Band Heater", "heating", 12, "Warehouse D-02"),
    ("part-009", "EXT-SCR-250", "Extruder Screw 250mm", "mechanical", 1, "Warehouse D-05"),
    ("part-010", "EXT-DIE-TR", "Tread Extrusion Die", "tooling", 2, "Warehouse D-07"),
    ("part-011", "TUM-LC-2KN", "Uniformity Load Cell 2kN", "sensors", 4, "Warehouse E-01"),
    ("part-012", "TUM-ENC-5000", "Spindle Encoder 5000ppr", "sensors", 3, "Warehouse E-02"),
    ("part-013", "BMX-TIP-500", "Mixer Rotor Tip Set", "wear_parts", 2, "Warehouse F-01"),
    ("part-014", "BMX-BRG-22320", "Spherical Roller Bearing 22320", "bearings", 4, "Warehouse F-03"),
    ("part-015", "BMX-SEAL-DP", "Mixer Dust Stop Seal", "seals", 6, "Warehouse F-04"),
]

PARTS_INVENTORY = [
    {
        "id": part_id,
        "partNumber": number,
        "name": name,
        "category": category,
        "quantityAvailable": quantity,
        "unitOfMeasure": "ea",
        "location": location,
    }
    for part_id, number, name, category, quantity, location in PARTS
]


async def seed_inventory(reset: bool = False) -> dict:
    """
    Seed technicians and parts inventory.

    Args:
        reset: Drop both collections before seeding

    Returns:
        Document counts per collection
    """
    config = get_config()
    config.validate()

    print(f"Connecting to MongoDB database '{config.mongo.database}'...")
    store = create_document_store(config.mongo)
    technicians = store.database[config.mongo.technicians_collection]
    parts = store.database[config.mongo.parts_collection]

    try:
        if reset:
            print("Dropping existing technicians and parts inventory...")
            await technicians.drop()
            await parts.drop()

        for document in TECHNICIANS:
            await technicians.replace_one({"id": document["id"]}, document, upsert=True)
        print(f"Upserted {len(TECHNICIANS)} technicians")

        for document in PARTS_INVENTORY:
            await parts.replace_one({"id": document["id"]}, document, upsert=True)
        print(f"Upserted {len(PARTS_INVENTORY)} parts")

        await store.ensure_indexes()
        print("Indexes ensured")

        return {
            config.mongo.technicians_collection: await technicians.count_documents({}),
            config.mongo.parts_collection: await parts.count_documents({}),
        }
    finally:
        await store.close()


def main():
    parser = argparse.ArgumentParser(
        description="Seed MongoDB with sample technicians and parts inventory"
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop existing collections before seeding"
    )

    args = parser.parse_args()

    stats = asyncio.run(seed_inventory(reset=args.reset))

    print(f"\nCollection Stats: {json.dumps(stats, indent=2)}")


if __name__ == "__main__":
    main()
