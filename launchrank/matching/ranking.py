"""Ranking pipeline for launchrank.

Every candidate is scored against the query first, then the candidates are
stably sorted by descending score. Candidates with equal scores keep the
order they were discovered in.

Example:
    >>> from launchrank.matching import Candidate, CandidateRanker
    >>> ranker = CandidateRanker()
    >>> results = ranker.rank([Candidate("other"), Candidate("testing")], "test")
    >>> [r.candidate.name for r in results]
    ['testing', 'other']
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence

from rapidfuzz import fuzz

from launchrank.models import RankedCandidate, ScoringMethod

from .alignment import LOWEST_SCORE
from .candidate import Candidate


class CandidateRanker:
    """Scores candidates against a query and orders them best first.

    Scoring runs on a thread pool when ``workers`` is greater than one.
    Both scorers hold the GIL while they run, so on CPython builds with a
    GIL extra workers give no speedup. Each candidate locks its own memo
    table, so sharing candidates between threads is safe.

    Attributes:
        workers: Number of scoring threads.
        scoring_method: How candidate names are scored.

    Example:
        >>> ranker = CandidateRanker(workers=4)
        >>> results = ranker.rank(candidates, "firefox", limit=10)
    """

    def __init__(
        self,
        workers: int = 1,
        scoring_method: ScoringMethod = ScoringMethod.ALIGNMENT,
    ) -> None:
        """Initialize the CandidateRanker.

        Args:
            workers: Number of scoring threads. Must be at least 1.
            scoring_method: Scorer to apply. Defaults to the alignment scorer.

        Raises:
            ValueError: If workers is less than 1.
        """
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.workers = workers
        self.scoring_method = scoring_method

    def score_all(
        self,
        candidates: Sequence[Candidate],
        query: str,
        progress_callback: Optional[Callable[[int], None]] = None,
    ) -> List[float]:
        """Score every candidate against the query.

        Args:
            candidates: Candidates in discovery order.
            query: Query string.
            progress_callback: Optional callable receiving the number of
                candidates scored so far.

        Returns:
            Scores in the same order as ``candidates``.
        """
        scorer = self._get_scorer(query)

        if self.workers == 1 or len(candidates) < 2:
            scores: List[float] = []
            for candidate in candidates:
                scores.append(scorer(candidate))
                if progress_callback is not None:
                    progress_callback(len(scores))
            return scores

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = [executor.submit(scorer, candidate) for candidate in candidates]
            scores = []
            for future in futures:
                scores.append(future.result())
                if progress_callback is not None:
                    progress_callback(len(scores))
        return scores

    def rank(
        self,
        candidates: Sequence[Candidate],
        query: str,
        limit: Optional[int] = None,
        min_score: Optional[float] = None,
        progress_callback: Optional[Callable[[int], None]] = None,
    ) -> List[RankedCandidate]:
        """Rank candidates against a query, best first.

        Args:
            candidates: Candidates in discovery order.
            query: Query string.
            limit: Keep at most this many results.
            min_score: Drop results scoring below this value.
            progress_callback: Forwarded to score_all().

        Returns:
            RankedCandidate list sorted by descending score. Ties keep
            discovery order.

        Raises:
            ValueError: If limit is less than 1.
        """
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        scores = self.score_all(candidates, query, progress_callback)

        # sorted() is stable, so equal scores keep discovery order
        order = sorted(range(len(candidates)), key=lambda idx: -scores[idx])

        results: List[RankedCandidate] = []
        for idx in order:
            if min_score is not None and scores[idx] < min_score:
                continue
            results.append(RankedCandidate(
                candidate=candidates[idx],
                score=scores[idx],
                position=len(results) + 1,
            ))
            if limit is not None and len(results) >= limit:
                break

        return results

    def _get_scorer(self, query: str) -> Callable[[Candidate], float]:
        """Return a callable scoring one candidate for the configured method."""
        if self.scoring_method is ScoringMethod.WEIGHTED_RATIO:
            return lambda candidate: _weighted_ratio(query, candidate)
        return lambda candidate: candidate.score(query)


def _weighted_ratio(query: str, candidate: Candidate) -> float:
    if len(query) > len(candidate.name):
        return LOWEST_SCORE
    return fuzz.WRatio(query, candidate.name)


def rank(
    candidates: Sequence[Candidate], query: str, workers: int = 1
) -> List[Candidate]:
    """Return the candidates reordered by descending alignment score."""
    ranker = CandidateRanker(workers=workers)
    return [result.candidate for result in ranker.rank(candidates, query)]
