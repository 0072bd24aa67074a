"""
Application Layer

Prompt construction, agent response parsing and the LangGraph planning
workflow.
"""
