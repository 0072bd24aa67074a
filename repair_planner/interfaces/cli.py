"""
CLI Interface

Runs one diagnosed fault through the repair planner and prints the stored
work order. Without arguments the built-in sample fault is planned.
"""

import argparse
import asyncio
from datetime import datetime, timezone
import json
import logging
from pathlib import Path
import sys
from typing import Optional
import uuid

from repair_planner.application.planner import RepairPlanner
from repair_planner.domain.fault_mapping import get_fault_mapping
from repair_planner.domain.models import DiagnosedFault, WorkOrder
from repair_planner.exceptions import RepairPlannerError
from repair_planner.infrastructure.config import AppConfig, get_config
from repair_planner.infrastructure.document_store import create_document_store
from repair_planner.infrastructure.langsmith_client import configure_langsmith
from repair_planner.infrastructure.llm_client import create_planner_agent_client

logger = logging.getLogger("repair_planner.cli")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


def sample_fault() -> DiagnosedFault:
    """The demo fault: curing press overheating."""
    return DiagnosedFault(
        id=uuid.uuid4().hex,
        machine_id="TCP-01",
        fault_type="curing_temperature_excessive",
        severity="high",
        description="Temperature exceeds target by 25C during curing cycle.",
        detected_at_utc=datetime.now(timezone.utc),
        confidence=0.92,
    )


def load_fault(fault_file: str) -> DiagnosedFault:
    """Load a fault from a JSON document."""
    path = Path(fault_file)
    if not path.exists():
        raise FileNotFoundError(f"Fault file not found: {fault_file}")

    with open(path, "r") as f:
        data = json.load(f)

    return DiagnosedFault.model_validate(data)


def build_fault(args: argparse.Namespace) -> DiagnosedFault:
    """Start from the file or sample fault, then apply command-line overrides."""
    fault = load_fault(args.fault_file) if args.fault_file else sample_fault()

    overrides = {
        "machine_id": args.machine_id,
        "fault_type": args.fault_type,
        "severity": args.severity,
        "description": args.description,
        "confidence": args.confidence,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if not fault.id:
        overrides["id"] = uuid.uuid4().hex

    if not overrides:
        return fault
    return DiagnosedFault.model_validate({**fault.model_dump(), **overrides})


async def run_planner(fault: DiagnosedFault, config: AppConfig) -> WorkOrder:
    """Wire the store and agent, plan the fault, release the store."""
    store = create_document_store(config.mongo)
    agent = create_planner_agent_client(config.llm)
    try:
        await store.ensure_indexes()
        agent.ensure_version()

        planner = RepairPlanner(store, agent)
        return await planner.plan_and_create_work_order(fault)
    finally:
        await store.close()


def print_fault_types() -> None:
    print("Known fault types:")
    for fault_type in get_fault_mapping().known_fault_types():
        print(f"  - {fault_type}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repair-planner",
        description="Repair Planner - turns a diagnosed equipment fault into a stored work order",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Plan the built-in sample fault (TCP-01, curing_temperature_excessive)
  repair-planner

  # Plan a fault read from a JSON file
  repair-planner --fault-file data/faults/tcp-01.json

  # Override parts of the sample fault
  repair-planner --machine-id BMX-02 --fault-type excessive_mixer_vibration

  # List the fault types with known requirements
  repair-planner --list-fault-types
        """,
    )

    parser.add_argument("--fault-file", "-f", type=str, help="JSON file with a diagnosed fault")
    parser.add_argument("--machine-id", "-m", type=str, help="Machine identifier")
    parser.add_argument("--fault-type", "-t", type=str, help="Fault type code")
    parser.add_argument("--severity", "-s", type=str, help="Severity label")
    parser.add_argument("--description", "-d", type=str, help="Fault description")
    parser.add_argument("--confidence", "-c", type=float, help="Diagnosis confidence (0.0-1.0)")
    parser.add_argument(
        "--list-fault-types", "-l",
        action="store_true",
        help="List known fault types and exit",
    )
    parser.add_argument("--log-level", type=str, help="Override LOG_LEVEL")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_fault_types:
        print_fault_types()
        return 0

    try:
        fault = build_fault(args)
    except (OSError, ValueError) as e:
        parser.error(f"Invalid fault: {e}")

    config = get_config()
    configure_logging(args.log_level or ("DEBUG" if config.debug else config.log_level))

    try:
        config.validate()
        configure_langsmith(config.langsmith)
        work_order = asyncio.run(run_planner(fault, config))
    except RepairPlannerError as e:
        logger.error("Planning failed: %s", json.dumps(e.to_dict(), default=str))
        return 1

    logger.info(
        "Saved work order %s (id=%s, status=%s, assignedTo=%s).",
        work_order.work_order_number,
        work_order.id,
        work_order.status,
        work_order.assigned_to or "unassigned",
    )
    print(json.dumps(work_order.to_json_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
