"""
CandidateKind and ScoringMethod enums.

CandidateKind tags each discovered filesystem entry:
1. Executable - at least one execute permission bit is set
2. File - everything else

ScoringMethod selects how the ranking pipeline scores a candidate name.
"""

from enum import Enum


class CandidateKind(Enum):
    """Classification tag for a discovered filesystem entry."""
    EXECUTABLE = "executable"          # Owner, group or other execute bit set
    FILE = "file"                      # No execute bit set


class ScoringMethod(Enum):
    """Scoring strategies available to the ranking pipeline."""
    ALIGNMENT = "alignment"            # Clamped local alignment (match +3, mismatch -3, gap -2)
    WEIGHTED_RATIO = "wratio"          # RapidFuzz WRatio (0-100)
