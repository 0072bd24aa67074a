"""
Repair Planner

A LangGraph-based pipeline that turns a diagnosed equipment fault into a
stored repair work order. A generative agent drafts the plan; technician
ranking, defaults and persistence are deterministic.

Architecture:
    - repair_planner/domain: Models, fault mapping, ranking, defaults
    - repair_planner/infrastructure: Config, MongoDB store, agent client, tracing
    - repair_planner/application: Prompts, response parsing, LangGraph workflow
    - repair_planner/interfaces: CLI

Usage:
    from repair_planner.application.planner import RepairPlanner
    from repair_planner.infrastructure.document_store import create_document_store
    from repair_planner.infrastructure.llm_client import create_planner_agent_client

    planner = RepairPlanner(create_document_store(config.mongo),
                            create_planner_agent_client(config.llm))
    work_order = await planner.plan_and_create_work_order(fault)
"""

__version__ = "1.0.0"
