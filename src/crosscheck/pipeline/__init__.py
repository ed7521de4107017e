"""Pipeline module for multi-source query orchestration."""

from crosscheck.pipeline.orchestrator import (
    FACT_CHECK_LOADING,
    FACT_CHECK_UNAVAILABLE,
    Panel,
    QueryOrchestrator,
    RunState,
)

__all__ = [
    "FACT_CHECK_LOADING",
    "FACT_CHECK_UNAVAILABLE",
    "Panel",
    "QueryOrchestrator",
    "RunState",
]
