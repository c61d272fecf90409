"""
Models package for launchrank.

This package provides convenient imports for all data models:
- CandidateKind: Executable/file tag
- ScoringMethod: Scoring strategy selector
- SourceConfig: Candidate source configuration
- RankedCandidate: One ranked result
- RankSummary: Scan-and-rank run summary
"""

from .candidate_kind import CandidateKind, ScoringMethod
from .data_models import (
    APPLICATIONS_DIR,
    RankedCandidate,
    RankSummary,
    SourceConfig,
)

__all__ = [
    "APPLICATIONS_DIR",
    "CandidateKind",
    "ScoringMethod",
    "SourceConfig",
    "RankedCandidate",
    "RankSummary",
]
