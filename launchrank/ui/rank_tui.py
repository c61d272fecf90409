"""Terminal User Interface for launchrank.

This module provides the RankTUI class, a Rich-based display for scan
statistics and ranked results, plus the query prompt used by the
interactive mode.

Example:
    from launchrank.ui import RankTUI

    tui = RankTUI()
    tui.display_scan_summary(total=1200, executable_count=800, file_count=400, roots=roots)
    tui.display_results(results, query="firefox")
"""

from pathlib import Path
from typing import Callable, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn
from rich.prompt import Prompt
from rich.table import Table

from launchrank.matching import LOWEST_SCORE
from launchrank.models import CandidateKind, RankedCandidate, RankSummary


class RankTUI:
    """Rich-based terminal display for ranking runs.

    Args:
        console: Optional Rich Console instance for output. If None, creates
            a new Console. Pass a custom Console for testing (e.g., with
            StringIO file for output capture).

    Attributes:
        console: The Rich Console instance used for all output.
    """

    QUIT_WORDS = ("q", ":q", "quit", "exit")

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def display_scan_summary(
        self,
        total: int,
        executable_count: int,
        file_count: int,
        roots: List[Path],
    ) -> None:
        """Display candidate counts and the searched roots in a panel.

        Args:
            total: Number of candidates discovered.
            executable_count: Candidates tagged executable.
            file_count: Candidates tagged file.
            roots: Search roots that were walked.
        """
        root_lines = "\n".join(f"  {root}" for root in roots) or "  (none)"
        header_text = (
            f"Candidates found: {total:,}\n"
            f"Executables: {executable_count:,}\n"
            f"Files: {file_count:,}\n"
            f"Search roots:\n{root_lines}"
        )
        self.console.print(Panel(header_text, title="Scan Results", border_style="blue"))

    def display_results(self, results: List[RankedCandidate], query: str) -> None:
        """Display ranked candidates in a table.

        Args:
            results: Ranked candidates in order.
            query: Query the candidates were ranked against.
        """
        if not results:
            self.console.print(f"[yellow]No candidates matched {query!r}.[/yellow]")
            return

        table = Table(title=f"Results for {query!r}")
        table.add_column("#", justify="right", style="cyan", no_wrap=True)
        table.add_column("Score", justify="right")
        table.add_column("Kind", style="magenta")
        table.add_column("Name", style="white")
        table.add_column("Path", style="dim")

        top_score = results[0].score
        for result in results:
            candidate = result.candidate
            table.add_row(
                str(result.position),
                self._format_score(result.score, top_score),
                self._format_kind(candidate.kind),
                self._truncate_name(candidate.name, max_length=50),
                str(candidate.path.parent) if candidate.path is not None else "",
            )

        self.console.print(table)

    def display_rank_summary(self, summary: RankSummary, show_errors: bool = False) -> None:
        """Display run statistics and, optionally, the collected errors.

        Args:
            summary: RankSummary of the run.
            show_errors: If True, list errors in a separate panel.
        """
        table = Table(show_header=True, header_style="bold")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")

        table.add_row("Candidates scanned", f"{summary.total_candidates:,}")
        table.add_row("Results listed", f"{len(summary.results):,}")
        table.add_row("Scoring", summary.scoring_method.value)
        table.add_row("Errors", f"{len(summary.errors):,}")
        table.add_row("Duration", f"{summary.duration_seconds:.2f}s")

        self.console.print(table)

        if show_errors and summary.errors:
            self._display_errors(summary.errors)

    def prompt_query(self) -> Optional[str]:
        """Ask for the next query.

        Returns:
            The query, or None when the user enters nothing or a quit word.
        """
        query = Prompt.ask("[bold]Query[/bold] (empty to quit)", default="", show_default=False)
        if not query or query.strip().lower() in self.QUIT_WORDS:
            return None
        return query

    def create_progress(self, total: int) -> tuple[Progress, Callable[[int], None]]:
        """Create a progress bar and callback for candidate scoring.

        The caller must use the returned Progress as a context manager.

        Args:
            total: Number of candidates to score.

        Returns:
            Tuple of (Progress, callback). The callback takes the number of
            candidates scored so far.
        """
        progress = Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=self.console,
            transient=True,
        )
        task_id = progress.add_task("Scoring candidates...", total=total)

        def callback(completed: int) -> None:
            progress.update(task_id, completed=completed)

        return progress, callback

    def _display_errors(self, errors: List[str]) -> None:
        """Display error messages in a separate panel."""
        max_display = 10
        displayed_errors = errors[:max_display]
        remaining = len(errors) - max_display

        error_text = "\n".join(f"- {e}" for e in displayed_errors)
        if remaining > 0:
            error_text += f"\n\n... and {remaining} more errors"

        self.console.print(
            Panel(error_text, title=f"Errors ({len(errors)})", border_style="red")
        )

    def _format_score(self, score: float, top_score: float) -> str:
        """Format a score with colour relative to the best score."""
        if score == LOWEST_SCORE:
            return "[dim]-[/dim]"
        if top_score > 0 and score >= top_score:
            return f"[green]{score:g}[/green]"
        elif score > 0:
            return f"[yellow]{score:g}[/yellow]"
        else:
            return f"[red]{score:g}[/red]"

    def _format_kind(self, kind: CandidateKind) -> str:
        if kind is CandidateKind.EXECUTABLE:
            return "[bold]exec[/bold]"
        return "file"

    def _truncate_name(self, name: str, max_length: int = 60) -> str:
        """Truncate long names with ellipsis."""
        if len(name) > max_length:
            return name[: max_length - 3] + "..."
        return name
