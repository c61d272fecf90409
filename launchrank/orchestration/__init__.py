"""Workflow orchestration package for launchrank.

This package contains orchestration components for ranking runs:
- RankLogger: Structured logging of ranking runs to timestamped log files.
- RankOrchestrator: Central coordinator for scan and rank workflows.
"""

from launchrank.orchestration.rank_logger import RankLogger
from launchrank.orchestration.rank_orchestrator import RankOrchestrator

__all__ = ["RankLogger", "RankOrchestrator"]
