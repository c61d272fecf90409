"""RankLogger for writing ranking runs to a structured log file.

This module provides the RankLogger class that writes a sectioned log of
one scan-and-rank run: header, scan phase, ranking results and summary.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, TextIO

from launchrank.matching import LOWEST_SCORE
from launchrank.models import RankedCandidate, RankSummary, ScoringMethod


class RankLogger:
    """Logger for ranking runs with a structured output format.

    Usage:
        with RankLogger(query="firefox") as logger:
            logger.log_header()
            logger.log_scan_phase(roots, total, executables, files, errors)
            logger.log_ranking(results)
            logger.log_summary(summary)

    Attributes:
        SEPARATOR: The 65-character separator line used between sections.
    """

    SEPARATOR = "=" * 65

    def __init__(
        self,
        log_file_path: Optional[Path] = None,
        query: str = "",
        scoring_method: ScoringMethod = ScoringMethod.ALIGNMENT,
    ) -> None:
        """Initialize the RankLogger.

        Args:
            log_file_path: Optional path for the log file. If not provided,
                generates a timestamped filename in the current directory.
            query: Query being ranked (used in header).
            scoring_method: Scorer used for the run (used in header).

        Raises:
            OSError: If the log file path is not writable.
        """
        self._query = query
        self._scoring_method = scoring_method
        self._start_timestamp = datetime.now()
        self._file_handle: Optional[TextIO] = None

        if log_file_path is None:
            timestamp_str = self._start_timestamp.strftime("%Y-%m-%d_%H-%M-%S")
            self._log_file_path = Path.cwd() / f"rank_log_{timestamp_str}.log"
        else:
            self._log_file_path = Path(log_file_path)

        self._validate_path()

    def _validate_path(self) -> None:
        """Validate that the log file path is writable.

        Raises:
            OSError: If the parent directory doesn't exist or is not writable.
        """
        parent = self._log_file_path.parent
        if not parent.exists():
            raise OSError(f"Parent directory does not exist: {parent}")
        if not parent.is_dir():
            raise OSError(f"Parent path is not a directory: {parent}")
        try:
            test_file = parent / f".launchrank_test_{id(self)}"
            test_file.touch()
            test_file.unlink()
        except PermissionError:
            raise OSError(f"Permission denied: cannot write to {parent}")

    def __enter__(self) -> "RankLogger":
        """Open the log file.

        Raises:
            OSError: If the file cannot be opened for writing.
        """
        try:
            self._file_handle = open(self._log_file_path, "w", encoding="utf-8")
        except OSError as e:
            raise OSError(f"Cannot open log file for writing: {e}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close the log file, even if an exception occurred."""
        if self._file_handle is not None:
            try:
                self._file_handle.close()
            except OSError as e:
                print(f"Warning: Error closing log file: {e}", file=sys.stderr)
            finally:
                self._file_handle = None

    def get_log_path(self) -> Path:
        """Get the path to the log file."""
        return self._log_file_path

    def log_header(self) -> None:
        """Write the title, timestamp, query and scoring method."""
        self._write_separator()
        self._write_line("launchrank - Rank Log")
        self._write_separator()
        self._write_line(f"Timestamp: {self._format_timestamp(self._start_timestamp)}")
        self._write_line(f"Query: {self._query!r}")
        self._write_line(f"Scoring: {self._scoring_method.value}")
        self._write_line("")

    def log_scan_phase(
        self,
        roots: List[Path],
        total_candidates: int,
        executable_count: int,
        file_count: int,
        errors: Optional[List[str]] = None,
    ) -> None:
        """Write the scan phase section.

        Args:
            roots: Search roots that were walked.
            total_candidates: Number of candidates discovered.
            executable_count: Candidates tagged executable.
            file_count: Candidates tagged file.
            errors: Non-fatal errors raised while scanning.
        """
        self._write_separator()
        self._write_line("SCAN PHASE")
        self._write_separator()
        self._write_line("Search roots:")
        for root in roots:
            self._write_line(f"- {root}", indent=2)
        self._write_line(f"Total candidates: {total_candidates:,}")
        self._write_line(f"Executables: {executable_count:,}", indent=2)
        self._write_line(f"Files: {file_count:,}", indent=2)

        if errors:
            self._write_line(f"Scan warnings: {len(errors)}")
            for error in errors:
                self._write_line(f"- {error}", indent=2)
        self._write_line("")

    def log_ranking(self, results: List[RankedCandidate]) -> None:
        """Write the ranked results, one line per candidate.

        Args:
            results: Ranked candidates in order.
        """
        self._write_separator()
        self._write_line("RANKING")
        self._write_separator()

        if not results:
            self._write_line("No candidates ranked.")
        for result in results:
            candidate = result.candidate
            location = candidate.path if candidate.path is not None else candidate.name
            self._write_line(
                f"{result.position:>4}. {self._format_score(result.score):>7}  "
                f"[{candidate.kind.value}] {location}"
            )
        self._write_line("")

    def log_summary(self, summary: RankSummary) -> None:
        """Write the summary section.

        Args:
            summary: The RankSummary of the run.
        """
        self._write_separator()
        self._write_line("SUMMARY")
        self._write_separator()
        self._write_line(f"Candidates scanned: {summary.total_candidates:,}")
        self._write_line(f"Results listed: {len(summary.results):,}")
        if summary.results:
            best = summary.results[0]
            self._write_line(
                f"Best match: {best.candidate.name} ({self._format_score(best.score)})"
            )

        if summary.errors:
            self._write_line(f"Total errors: {len(summary.errors)}")

        if summary.interrupted:
            self._write_line("Run interrupted by user")

        self._write_line(f"Duration: {summary.duration_seconds:.2f}s")
        self._write_line("")
        self._write_line(f"Log file: {self._log_file_path}")
        self._write_separator()

    def _format_score(self, score: float) -> str:
        """Format a score, showing the unmatchable sentinel as '-'."""
        if score == LOWEST_SCORE:
            return "-"
        return f"{score:g}"

    def _format_timestamp(self, dt: datetime) -> str:
        """Format a datetime as 'YYYY-MM-DD HH:MM:SS'."""
        return dt.strftime("%Y-%m-%d %H:%M:%S")

    def _write_separator(self) -> None:
        """Write a separator line to the log file."""
        self._write_line(self.SEPARATOR)

    def _write_line(self, text: str, indent: int = 0) -> None:
        """Write a line to the log file with optional indentation.

        Args:
            text: The text to write.
            indent: Number of spaces to indent the line.
        """
        if self._file_handle is None:
            print(
                f"Warning: Attempted to write to closed log file: {text}",
                file=sys.stderr,
            )
            return

        try:
            self._file_handle.write(" " * indent + text + "\n")
        except OSError as e:
            print(f"Warning: Error writing to log file: {e}", file=sys.stderr)
