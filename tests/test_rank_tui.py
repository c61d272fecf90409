"""Tests for the RankTUI class."""

import io
from pathlib import Path
from typing import List
from unittest.mock import patch

import pytest

from launchrank.matching import LOWEST_SCORE, Candidate
from launchrank.models import CandidateKind, RankedCandidate, RankSummary
from launchrank.ui import RankTUI


@pytest.fixture
def ranked_results() -> List[RankedCandidate]:
    return [
        RankedCandidate(
            candidate=Candidate.from_path(Path("/usr/bin/firefox"), CandidateKind.EXECUTABLE),
            score=21.0,
            position=1,
        ),
        RankedCandidate(candidate=Candidate("notes.txt"), score=0.0, position=2),
    ]


class TestRankTUIDisplay:
    """Tests for display methods with captured console output."""

    def test_display_scan_summary(self, tui_with_output: tuple[RankTUI, io.StringIO]) -> None:
        tui, output = tui_with_output

        tui.display_scan_summary(
            total=1200, executable_count=800, file_count=400, roots=[Path("/usr/bin")]
        )

        result = output.getvalue()
        assert "Scan Results" in result
        assert "Candidates found: 1,200" in result
        assert "Executables: 800" in result
        assert "Files: 400" in result
        assert "/usr/bin" in result

    def test_display_scan_summary_no_roots(self, tui_with_output: tuple[RankTUI, io.StringIO]) -> None:
        tui, output = tui_with_output

        tui.display_scan_summary(total=0, executable_count=0, file_count=0, roots=[])

        assert "(none)" in output.getvalue()

    def test_display_results(
        self, tui_with_output: tuple[RankTUI, io.StringIO], ranked_results: List[RankedCandidate]
    ) -> None:
        tui, output = tui_with_output

        tui.display_results(ranked_results, "fire")

        result = output.getvalue()
        assert "Results for 'fire'" in result
        assert "firefox" in result
        assert "notes.txt" in result
        assert "21" in result
        assert "exec" in result
        assert "/usr/bin" in result

    def test_display_results_empty(self, tui_with_output: tuple[RankTUI, io.StringIO]) -> None:
        tui, output = tui_with_output

        tui.display_results([], "zzz")

        assert "No candidates matched 'zzz'" in output.getvalue()

    def test_display_rank_summary(self, tui_with_output: tuple[RankTUI, io.StringIO]) -> None:
        tui, output = tui_with_output
        summary = RankSummary(query="x", total_candidates=42, errors=["boom"], duration_seconds=1.25)

        tui.display_rank_summary(summary)

        result = output.getvalue()
        assert "Candidates scanned" in result
        assert "42" in result
        assert "1.25s" in result
        assert "boom" not in result

    def test_display_rank_summary_with_errors(self, tui_with_output: tuple[RankTUI, io.StringIO]) -> None:
        tui, output = tui_with_output
        errors = [f"error {i}" for i in range(12)]

        tui.display_rank_summary(RankSummary(query="x", errors=errors), show_errors=True)

        result = output.getvalue()
        assert "Errors (12)" in result
        assert "error 9" in result
        assert "error 10" not in result
        assert "and 2 more errors" in result


class TestRankTUIFormatting:
    """Tests for formatting helpers."""

    def test_truncate_name(self) -> None:
        tui = RankTUI()

        assert tui._truncate_name("short", max_length=10) == "short"
        assert tui._truncate_name("a" * 20, max_length=10) == "a" * 7 + "..."

    def test_format_unmatchable_score(self) -> None:
        assert RankTUI()._format_score(LOWEST_SCORE, 9.0) == "[dim]-[/dim]"

    def test_format_top_score_green(self) -> None:
        assert RankTUI()._format_score(9.0, 9.0) == "[green]9[/green]"


class TestRankTUIPrompt:
    """Tests for the query prompt."""

    @pytest.mark.parametrize("answer", ["", "q", "QUIT", " exit "])
    def test_prompt_quit(self, answer: str) -> None:
        with patch("launchrank.ui.rank_tui.Prompt.ask", return_value=answer):
            assert RankTUI().prompt_query() is None

    def test_prompt_returns_query(self) -> None:
        with patch("launchrank.ui.rank_tui.Prompt.ask", return_value="fire"):
            assert RankTUI().prompt_query() == "fire"


class TestRankTUIProgress:
    """Tests for the scoring progress bar."""

    def test_progress_callback_updates_task(self, tui_with_output: tuple[RankTUI, io.StringIO]) -> None:
        tui, _ = tui_with_output

        progress, callback = tui.create_progress(total=5)
        with progress:
            callback(3)
            task = progress.tasks[0]
            assert task.completed == 3
            assert task.total == 5
