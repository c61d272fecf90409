"""Tests for RankLogger structured log output."""

from pathlib import Path
from typing import List

import pytest

from launchrank.matching import LOWEST_SCORE, Candidate
from launchrank.models import CandidateKind, RankedCandidate, RankSummary, ScoringMethod
from launchrank.orchestration import RankLogger


@pytest.fixture
def ranked_results() -> List[RankedCandidate]:
    """Three ranked results, the last one unmatchable."""
    return [
        RankedCandidate(
            candidate=Candidate.from_path(Path("/usr/bin/firefox"), CandidateKind.EXECUTABLE),
            score=21.0,
            position=1,
        ),
        RankedCandidate(candidate=Candidate("fire.txt"), score=12.0, position=2),
        RankedCandidate(candidate=Candidate("ff"), score=LOWEST_SCORE, position=3),
    ]


class TestRankLoggerInit:
    """Tests for log path handling."""

    def test_default_path_is_timestamped(self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(temp_dir)

        logger = RankLogger(query="fire")

        log_path = logger.get_log_path()
        assert log_path.parent == temp_dir
        assert log_path.name.startswith("rank_log_")
        assert log_path.suffix == ".log"

    def test_missing_parent_raises(self, temp_dir: Path) -> None:
        with pytest.raises(OSError, match="Parent directory does not exist"):
            RankLogger(log_file_path=temp_dir / "missing" / "run.log")

    def test_parent_is_file_raises(self, temp_dir: Path) -> None:
        blocker = temp_dir / "blocker"
        blocker.write_text("x")

        with pytest.raises(OSError, match="not a directory"):
            RankLogger(log_file_path=blocker / "run.log")

    def test_validation_leaves_no_files(self, temp_dir: Path) -> None:
        RankLogger(log_file_path=temp_dir / "run.log")

        assert list(temp_dir.iterdir()) == []


class TestRankLoggerSections:
    """Tests for the written sections."""

    def test_full_log(self, temp_dir: Path, ranked_results: List[RankedCandidate]) -> None:
        log_path = temp_dir / "run.log"
        summary = RankSummary(
            query="fire",
            total_candidates=3,
            executable_count=1,
            file_count=2,
            results=ranked_results,
            errors=["Search root not found: /nope"],
            duration_seconds=0.5,
        )

        with RankLogger(log_file_path=log_path, query="fire") as logger:
            logger.log_header()
            logger.log_scan_phase(
                roots=[Path("/usr/bin"), Path("/nope")],
                total_candidates=3,
                executable_count=1,
                file_count=2,
                errors=summary.errors,
            )
            logger.log_ranking(ranked_results)
            logger.log_summary(summary)

        content = log_path.read_text(encoding="utf-8")
        assert "launchrank - Rank Log" in content
        assert "Query: 'fire'" in content
        assert "Scoring: alignment" in content
        assert "SCAN PHASE" in content
        assert "  - /usr/bin" in content
        assert "Total candidates: 3" in content
        assert "Scan warnings: 1" in content
        assert "RANKING" in content
        assert "[executable] /usr/bin/firefox" in content
        assert "[file] fire.txt" in content
        assert "SUMMARY" in content
        assert "Best match: firefox (21)" in content
        assert "Total errors: 1" in content
        assert "Duration: 0.50s" in content
        assert f"Log file: {log_path}" in content
        assert RankLogger.SEPARATOR in content

    def test_ranking_formats_scores(self, temp_dir: Path, ranked_results: List[RankedCandidate]) -> None:
        log_path = temp_dir / "run.log"

        with RankLogger(log_file_path=log_path) as logger:
            logger.log_ranking(ranked_results)

        lines = log_path.read_text(encoding="utf-8").splitlines()
        ranking_lines = [line for line in lines if line.strip()[:2] in ("1.", "2.", "3.")]
        assert ranking_lines[0].split()[1] == "21"
        assert ranking_lines[1].split()[1] == "12"
        assert ranking_lines[2].split()[1] == "-"

    def test_empty_ranking(self, temp_dir: Path) -> None:
        log_path = temp_dir / "run.log"

        with RankLogger(log_file_path=log_path) as logger:
            logger.log_ranking([])

        assert "No candidates ranked." in log_path.read_text(encoding="utf-8")

    def test_header_records_scoring_method(self, temp_dir: Path) -> None:
        log_path = temp_dir / "run.log"

        with RankLogger(
            log_file_path=log_path, query="x", scoring_method=ScoringMethod.WEIGHTED_RATIO
        ) as logger:
            logger.log_header()

        assert "Scoring: wratio" in log_path.read_text(encoding="utf-8")

    def test_interrupted_summary(self, temp_dir: Path) -> None:
        log_path = temp_dir / "run.log"

        with RankLogger(log_file_path=log_path) as logger:
            logger.log_summary(RankSummary(query="x", interrupted=True))

        assert "Run interrupted by user" in log_path.read_text(encoding="utf-8")


class TestRankLoggerClosed:
    """Writing outside the context manager only warns."""

    def test_write_after_close_warns(self, temp_dir: Path, capsys: pytest.CaptureFixture) -> None:
        logger = RankLogger(log_file_path=temp_dir / "run.log")
        with logger:
            pass

        logger.log_header()

        assert "Attempted to write to closed log file" in capsys.readouterr().err
