"""Rankable candidate with a per-name alignment memo table.

Example:
    >>> from launchrank.matching import Candidate
    >>> candidate = Candidate("testing")
    >>> candidate.score("test")
    12.0
"""

import threading
from pathlib import Path
from typing import Optional

from launchrank.models import CandidateKind

from .alignment import (
    LOWEST_SCORE,
    AlignmentTable,
    fill_alignment_table,
    new_alignment_table,
)


class ScoreNotEvaluatedError(RuntimeError):
    """Raised when a score is read before the query was evaluated."""


class Candidate:
    """One filesystem entry that can be scored against queries.

    The memo table is sized ``len(name) x len(name)`` at construction and
    kept for the candidate's lifetime. Row ``i`` only depends on the first
    ``i + 1`` query characters, so when a new query shares a prefix with
    the previously evaluated one those rows are reused and only the rest
    are reset and recomputed.

    Attributes:
        path: Full path the entry was discovered at, if any.
        kind: Executable/file tag. Does not affect scoring.
    """

    def __init__(
        self,
        name: str,
        path: Optional[Path] = None,
        kind: CandidateKind = CandidateKind.FILE,
    ) -> None:
        self._name = name
        self.path = path
        self.kind = kind
        self._table: AlignmentTable = new_alignment_table(len(name))
        # Query whose rows are currently held in the table
        self._evaluated_query: Optional[str] = None
        self._lock = threading.Lock()

    @classmethod
    def from_path(
        cls, path: Path, kind: CandidateKind = CandidateKind.FILE
    ) -> "Candidate":
        """Create a candidate named after the final component of ``path``."""
        return cls(Path(path).name, path=Path(path), kind=kind)

    @property
    def name(self) -> str:
        """Display name (final path component)."""
        return self._name

    @property
    def table_size(self) -> int:
        """Side length of the memo table."""
        return len(self._table)

    def evaluate(self, query: str) -> float:
        """Compute the memo rows needed to score ``query``.

        Args:
            query: Query string.

        Returns:
            Score of the whole query against the whole name. 0 for an empty
            query or name, LOWEST_SCORE if the query is longer than the name.
        """
        if len(query) > len(self._name):
            return LOWEST_SCORE
        if not query or not self._name:
            return 0.0

        with self._lock:
            self._prepare_rows(query)
            return self._table[len(query) - 1][len(self._name) - 1]

    def get_score(self, query: str) -> float:
        """Read the best score of ``query`` against any prefix of the name.

        ``evaluate(query)`` must have been called first.

        Raises:
            ScoreNotEvaluatedError: If the rows for ``query`` were not computed.
        """
        if len(query) > len(self._name):
            return LOWEST_SCORE
        if not query:
            return 0.0

        with self._lock:
            evaluated = self._evaluated_query
            if evaluated is None or not evaluated.startswith(query):
                raise ScoreNotEvaluatedError(
                    f"Query {query!r} has not been evaluated for {self._name!r}"
                )
            return max(self._table[len(query) - 1])

    def score(self, query: str) -> float:
        """Evaluate ``query`` and return its best score."""
        if len(query) > len(self._name):
            return LOWEST_SCORE
        if not query:
            return 0.0

        with self._lock:
            self._prepare_rows(query)
            return max(self._table[len(query) - 1])

    def _prepare_rows(self, query: str) -> None:
        """Make rows ``0..len(query) - 1`` valid for ``query``. Caller holds the lock."""
        previous = self._evaluated_query or ""
        shared = 0
        for old_char, new_char in zip(previous, query):
            if old_char != new_char:
                break
            shared += 1

        if shared < len(query):
            for row in self._table[shared:len(previous)]:
                for j in range(len(row)):
                    row[j] = LOWEST_SCORE
            fill_alignment_table(query, self._name, self._table, start_row=shared)

        if not previous.startswith(query):
            self._evaluated_query = query

    def __repr__(self) -> str:
        return f"Candidate(name={self._name!r}, kind={self.kind.value})"
