"""Candidate matching package for launchrank.

This package contains the alignment scorer, the Candidate type that owns a
memo table per name, and the CandidateRanker that orders candidates by score.

Example:
    >>> from launchrank.matching import Candidate, CandidateRanker
    >>> candidates = [Candidate("test.txt"), Candidate("testing"), Candidate("other")]
    >>> for result in CandidateRanker().rank(candidates, "test"):
    ...     print(f"{result.position}. {result.candidate.name} ({result.score:g})")
"""

from .alignment import (
    GAP_PENALTY,
    LOWEST_SCORE,
    MATCH_BONUS,
    MISMATCH_PENALTY,
    alignment_score,
    best_prefix_score,
)
from .candidate import Candidate, ScoreNotEvaluatedError
from .ranking import CandidateRanker, rank

__all__ = [
    "GAP_PENALTY",
    "LOWEST_SCORE",
    "MATCH_BONUS",
    "MISMATCH_PENALTY",
    "alignment_score",
    "best_prefix_score",
    "Candidate",
    "ScoreNotEvaluatedError",
    "CandidateRanker",
    "rank",
]
