"""launchrank - Fuzzy launcher ranking for filesystem entries.

Scores application launchers, executables and files against a free-text
query with a clamped local-alignment scorer and lists the best matches
first.
"""

__version__ = "0.1.0"

from .matching import Candidate, CandidateRanker, ScoreNotEvaluatedError, rank
from .models import (
    CandidateKind,
    RankedCandidate,
    RankSummary,
    ScoringMethod,
    SourceConfig,
)

__all__ = [
    "__version__",
    "Candidate",
    "CandidateRanker",
    "ScoreNotEvaluatedError",
    "rank",
    "CandidateKind",
    "RankedCandidate",
    "RankSummary",
    "ScoringMethod",
    "SourceConfig",
]


def main() -> None:
    """Entry point for the launchrank CLI application."""
    from launchrank.cli import app
    app()
