"""
Core data models for launchrank.

This module contains the following dataclasses:
- SourceConfig: Search roots and limits for the candidate source
- RankedCandidate: One entry of a ranked result list
- RankSummary: Summary of a scan-and-rank run
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, List, Mapping, Optional

from .candidate_kind import ScoringMethod

if TYPE_CHECKING:
    from launchrank.matching.candidate import Candidate


# Desktop entries are always searched first
APPLICATIONS_DIR = Path("/usr/share/applications")


@dataclass
class SourceConfig:
    """Search roots and traversal limits for the candidate source."""
    roots: List[Path] = field(default_factory=list)  # Directories walked recursively
    max_name_length: int = 255                        # Longer names are skipped
    follow_symlinks: bool = False                     # Descend into directory symlinks

    def __post_init__(self) -> None:
        if self.max_name_length < 1:
            raise ValueError(
                f"max_name_length must be at least 1, got {self.max_name_length}"
            )
        unique: List[Path] = []
        for root in self.roots:
            root = Path(root)
            if root not in unique:
                unique.append(root)
        self.roots = unique

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str],
        home: Optional[Path] = None,
        **kwargs,
    ) -> "SourceConfig":
        """Build the default root list from an environment mapping.

        Roots are, in order: the system applications directory, the home
        directory, then every non-empty entry of PATH.

        Args:
            environ: Environment mapping (usually os.environ).
            home: Home directory override. Defaults to environ["HOME"].
            **kwargs: Forwarded to the SourceConfig constructor.

        Returns:
            SourceConfig with the default roots.
        """
        roots: List[Path] = [APPLICATIONS_DIR]

        home_dir = home if home is not None else environ.get("HOME")
        if home_dir:
            roots.append(Path(home_dir))

        for entry in environ.get("PATH", "").split(":"):
            if entry:
                roots.append(Path(entry))

        return cls(roots=roots, **kwargs)


@dataclass
class RankedCandidate:
    """A candidate at its position in a ranked result list."""
    candidate: "Candidate"            # Ranked candidate (not copied)
    score: float                      # Score used for ordering
    position: int                     # 1-based rank


@dataclass
class RankSummary:
    """Summary of a scan-and-rank run returned by RankOrchestrator."""
    query: str                                               # Query that was ranked
    scoring_method: ScoringMethod = ScoringMethod.ALIGNMENT  # Scorer used
    total_candidates: int = 0                                # Candidates discovered
    executable_count: int = 0                                # Candidates tagged executable
    file_count: int = 0                                      # Candidates tagged file
    results: List[RankedCandidate] = field(default_factory=list)  # Ordered results
    errors: List[str] = field(default_factory=list)          # Non-fatal errors
    duration_seconds: float = 0.0                            # Total run time
    interrupted: bool = False                                # Interrupted by user
