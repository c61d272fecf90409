"""RankOrchestrator for coordinating candidate scanning and ranking.

This module provides the RankOrchestrator class that runs the scan phase
(CandidateSource), the rank phase (CandidateRanker), displays results
through RankTUI and optionally records the run with RankLogger.

Example:
    from launchrank.models import SourceConfig
    from launchrank.orchestration import RankOrchestrator
    from pathlib import Path

    orchestrator = RankOrchestrator(SourceConfig(roots=[Path("/usr/bin")]), limit=10)

    # Scan once, rank one query
    summary = orchestrator.run("python")

    # Scan once, rank many queries against the same candidates
    summaries = orchestrator.interactive()
"""

import sys
import time
from pathlib import Path
from typing import List, Optional

from launchrank.matching import Candidate, CandidateRanker
from launchrank.models import RankedCandidate, RankSummary, ScoringMethod, SourceConfig
from launchrank.orchestration.rank_logger import RankLogger
from launchrank.scanning import CandidateSource
from launchrank.ui import RankTUI


class RankOrchestrator:
    """Orchestrates candidate scanning and ranking workflows.

    The candidate list is built once by scan() and reused by every later
    call to rank(), so each candidate's memo table survives between
    queries.

    Attributes:
        config: Search roots and traversal limits.
        scoring_method: Scorer used by the ranker.
        limit: Maximum number of results listed per query.
        min_score: Results scoring below this are dropped.
        log_file_path: Optional path for a log file per ranking run.
        verbose: Whether to display warnings and extra details.
    """

    def __init__(
        self,
        config: SourceConfig,
        scoring_method: ScoringMethod = ScoringMethod.ALIGNMENT,
        workers: int = 1,
        limit: Optional[int] = 20,
        min_score: Optional[float] = None,
        log_file_path: Optional[Path] = None,
        verbose: bool = False,
        tui: Optional[RankTUI] = None,
    ) -> None:
        """Initialize the RankOrchestrator.

        Args:
            config: Search roots and traversal limits.
            scoring_method: Scorer to rank with. Defaults to alignment.
            workers: Number of scoring threads. Must be at least 1.
            limit: Maximum results per query, or None for all.
            min_score: Optional score threshold.
            log_file_path: If given, each ranking run is logged there.
            verbose: If True, display warnings and extra details.
            tui: Optional RankTUI; a default one is created if omitted.

        Raises:
            ValueError: If no search roots are configured, workers is less
                than 1 or limit is less than 1.
        """
        if not config.roots:
            raise ValueError("At least one search root is required")
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        self.config = config
        self.scoring_method = scoring_method
        self.limit = limit
        self.min_score = min_score
        self.log_file_path = log_file_path
        self.verbose = verbose

        self._source = CandidateSource(config)
        self._ranker = CandidateRanker(workers=workers, scoring_method=scoring_method)
        self._tui = tui or RankTUI()

        self._candidates: Optional[List[Candidate]] = None
        self._errors: List[str] = []

    @property
    def candidates(self) -> List[Candidate]:
        """Candidates from the last scan (scanning first if needed)."""
        if self._candidates is None:
            self.scan()
        return self._candidates

    def scan(self) -> List[Candidate]:
        """Enumerate the search roots and display scan statistics.

        Returns:
            Candidates in discovery order.
        """
        self._source.clear_errors()
        candidates = self._source.collect()
        self._candidates = candidates

        scan_errors = self._source.get_errors()
        self._errors = list(scan_errors)

        executables, files = self._source.count_by_kind(candidates)
        self._tui.display_scan_summary(
            total=len(candidates),
            executable_count=executables,
            file_count=files,
            roots=self.config.roots,
        )

        if self.verbose and scan_errors:
            self._tui.console.print(
                f"[dim]Scanner encountered {len(scan_errors)} warnings[/dim]"
            )

        return candidates

    def rank(self, query: str) -> RankSummary:
        """Rank the scanned candidates against ``query`` and display them.

        Args:
            query: Query string.

        Returns:
            RankSummary for this query.
        """
        start_time = time.time()
        candidates = self.candidates

        interrupted = False
        results: List[RankedCandidate] = []
        progress, callback = self._tui.create_progress(len(candidates))
        try:
            with progress:
                results = self._ranker.rank(
                    candidates,
                    query,
                    limit=self.limit,
                    min_score=self.min_score,
                    progress_callback=callback,
                )
        except KeyboardInterrupt:
            self._tui.console.print("\n[yellow]Ranking interrupted by user.[/yellow]")
            interrupted = True

        executables, files = self._source.count_by_kind(candidates)
        summary = RankSummary(
            query=query,
            scoring_method=self.scoring_method,
            total_candidates=len(candidates),
            executable_count=executables,
            file_count=files,
            results=results,
            errors=self._errors.copy(),
            duration_seconds=time.time() - start_time,
            interrupted=interrupted,
        )

        if not interrupted:
            self._tui.display_results(results, query)
        if self.verbose:
            self._tui.display_rank_summary(summary, show_errors=True)

        if self.log_file_path is not None:
            self._write_log(summary)

        return summary

    def run(self, query: str) -> RankSummary:
        """Scan the search roots, then rank ``query``."""
        start_time = time.time()
        self.scan()
        summary = self.rank(query)
        summary.duration_seconds = time.time() - start_time
        return summary

    def interactive(self) -> List[RankSummary]:
        """Scan once, then rank queries from the prompt until the user quits.

        Returns:
            One RankSummary per query, in the order they were entered.
        """
        summaries: List[RankSummary] = []
        self.scan()

        while True:
            try:
                query = self._tui.prompt_query()
            except (KeyboardInterrupt, EOFError):
                self._tui.console.print("")
                break

            if query is None:
                break

            summary = self.rank(query)
            summaries.append(summary)
            if summary.interrupted:
                break

        return summaries

    def _write_log(self, summary: RankSummary) -> None:
        """Write one run to the log file. Failures only produce a warning."""
        try:
            with RankLogger(
                log_file_path=self.log_file_path,
                query=summary.query,
                scoring_method=summary.scoring_method,
            ) as logger:
                logger.log_header()
                logger.log_scan_phase(
                    roots=self.config.roots,
                    total_candidates=summary.total_candidates,
                    executable_count=summary.executable_count,
                    file_count=summary.file_count,
                    errors=summary.errors,
                )
                logger.log_ranking(summary.results)
                logger.log_summary(summary)

                if self.verbose:
                    self._tui.console.print(
                        f"[dim]Log file: {logger.get_log_path()}[/dim]"
                    )
        except OSError as e:
            print(f"Warning: Could not create log file: {e}", file=sys.stderr)
