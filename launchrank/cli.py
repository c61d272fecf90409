"""
launchrank - CLI Interface.

A command-line interface for ranking launchers, executables and files
against a query by approximate name similarity.

Usage Examples:
    # Rank entries under the default roots (applications, $HOME, $PATH)
    python -m launchrank rank firefox

    # Only search specific directories
    python -m launchrank rank term --no-default-roots --root /usr/bin --root ~/bin

    # Show every result scoring at least 6, using 4 scoring threads
    python -m launchrank rank code --min-score 6 --workers 4

    # Score one query/name pair
    python -m launchrank score test testing

    # Keep the scanned candidates and type queries interactively
    python -m launchrank interactive --root /usr/share/applications
"""

import os
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from launchrank import __version__
from launchrank.matching import LOWEST_SCORE, Candidate, alignment_score
from launchrank.models import ScoringMethod, SourceConfig
from launchrank.orchestration import RankOrchestrator
from launchrank.ui import RankTUI

# Initialize Typer app
app = typer.Typer(
    name="launchrank",
    help="launchrank - Rank launchers, executables and files by fuzzy name match.",
    add_completion=False,
    no_args_is_help=True,
)

# Rich console for consistent output formatting
console = Console()


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"launchrank v{__version__}")
        raise typer.Exit()


def validate_positive(value: Optional[int]) -> Optional[int]:
    """
    Validate that an optional count is at least 1.

    Raises:
        typer.BadParameter: If value is less than 1.
    """
    if value is not None and value < 1:
        raise typer.BadParameter("Value must be at least 1")
    return value


def build_source_config(
    roots: Optional[List[Path]],
    default_roots: bool,
    max_name_length: int,
    follow_symlinks: bool,
) -> SourceConfig:
    """
    Build the SourceConfig for a command from its options.

    Default roots come from the process environment; explicit --root values
    are appended after them.

    Raises:
        typer.Exit: If no search root remains.
    """
    all_roots: List[Path] = []
    if default_roots:
        all_roots.extend(SourceConfig.from_environment(os.environ).roots)
    for root in roots or []:
        all_roots.append(root.expanduser())

    if not all_roots:
        console.print(
            "[red]Error:[/red] No search roots. Pass --root or drop --no-default-roots."
        )
        raise typer.Exit(1)

    try:
        return SourceConfig(
            roots=all_roots,
            max_name_length=max_name_length,
            follow_symlinks=follow_symlinks,
        )
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


ROOT_OPTION = typer.Option(
    None,
    "--root",
    "-r",
    help="Directory to search recursively (repeatable).",
)
DEFAULT_ROOTS_OPTION = typer.Option(
    True,
    "--default-roots/--no-default-roots",
    help="Include /usr/share/applications, $HOME and $PATH entries.",
)
MAX_NAME_OPTION = typer.Option(
    255,
    "--max-name-length",
    help="Skip entries whose name is longer than this.",
    min=1,
)
FOLLOW_SYMLINKS_OPTION = typer.Option(
    False,
    "--follow-symlinks",
    help="Descend into symlinked directories.",
)
LIMIT_OPTION = typer.Option(
    20,
    "--limit",
    "-n",
    help="Maximum number of results to list.",
    callback=validate_positive,
)
MIN_SCORE_OPTION = typer.Option(
    None,
    "--min-score",
    help="Hide results scoring below this value.",
)
WORKERS_OPTION = typer.Option(
    1,
    "--workers",
    "-w",
    help="Number of scoring threads.",
    callback=validate_positive,
)
SCORER_OPTION = typer.Option(
    ScoringMethod.ALIGNMENT.value,
    "--scorer",
    "-s",
    help="Scoring method: 'alignment' or 'wratio'.",
)
LOG_FILE_OPTION = typer.Option(
    None,
    "--log-file",
    "-l",
    help="Path for log file output.",
)
VERBOSE_OPTION = typer.Option(
    False,
    "--verbose",
    "-V",
    help="Enable verbose output.",
)


def parse_scorer(value: str) -> ScoringMethod:
    """
    Convert a --scorer value to a ScoringMethod.

    Raises:
        typer.Exit: If the value names no scoring method.
    """
    try:
        return ScoringMethod(value.lower())
    except ValueError:
        choices = ", ".join(method.value for method in ScoringMethod)
        console.print(f"[red]Error:[/red] Unknown scorer {value!r} (choose from {choices})")
        raise typer.Exit(1)


def create_orchestrator(
    config: SourceConfig,
    scorer: str,
    workers: int,
    limit: Optional[int],
    min_score: Optional[float],
    log_file: Optional[Path],
    verbose: bool,
) -> RankOrchestrator:
    """Create a RankOrchestrator sharing the CLI console."""
    try:
        return RankOrchestrator(
            config,
            scoring_method=parse_scorer(scorer),
            workers=workers,
            limit=limit,
            min_score=min_score,
            log_file_path=log_file,
            verbose=verbose,
            tui=RankTUI(console=console),
        )
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """launchrank - Rank launchers, executables and files by fuzzy name match."""
    pass


@app.command()
def rank(
    query: str = typer.Argument(..., help="Text to match against entry names."),
    roots: Optional[List[Path]] = ROOT_OPTION,
    default_roots: bool = DEFAULT_ROOTS_OPTION,
    max_name_length: int = MAX_NAME_OPTION,
    follow_symlinks: bool = FOLLOW_SYMLINKS_OPTION,
    limit: int = LIMIT_OPTION,
    min_score: Optional[float] = MIN_SCORE_OPTION,
    workers: int = WORKERS_OPTION,
    scorer: str = SCORER_OPTION,
    log_file: Optional[Path] = LOG_FILE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """
    Scan the search roots and list the entries best matching QUERY.

    Every entry is scored against the query, then entries are listed by
    descending score. Entries with equal scores keep discovery order.
    """
    config = build_source_config(roots, default_roots, max_name_length, follow_symlinks)
    orchestrator = create_orchestrator(
        config, scorer, workers, limit, min_score, log_file, verbose
    )

    try:
        summary = orchestrator.run(query)

        if log_file and verbose:
            console.print(f"[dim]Log written to: {log_file}[/dim]")

        if summary.interrupted:
            raise typer.Exit(130)

    except KeyboardInterrupt:
        console.print("\n[yellow]Scan interrupted by user.[/yellow]")
        raise typer.Exit(130)

    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def score(
    query: str = typer.Argument(..., help="Query string."),
    name: str = typer.Argument(..., help="Candidate name."),
) -> None:
    """
    Show the alignment scores of QUERY against NAME.

    'Best score' is the value used for ranking: the whole query against the
    best-matching prefix of the name. 'Full alignment' aligns the whole
    query against the whole name.
    """
    candidate = Candidate(name)
    full = candidate.evaluate(query)
    best = candidate.get_score(query)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Query", repr(query))
    table.add_row("Name", repr(name))
    table.add_row("Best score", _format_value(best))
    table.add_row("Full alignment", _format_value(full))
    table.add_row("Standalone check", _format_value(alignment_score(query, name)))
    console.print(table)


@app.command()
def interactive(
    roots: Optional[List[Path]] = ROOT_OPTION,
    default_roots: bool = DEFAULT_ROOTS_OPTION,
    max_name_length: int = MAX_NAME_OPTION,
    follow_symlinks: bool = FOLLOW_SYMLINKS_OPTION,
    limit: int = LIMIT_OPTION,
    min_score: Optional[float] = MIN_SCORE_OPTION,
    workers: int = WORKERS_OPTION,
    scorer: str = SCORER_OPTION,
    log_file: Optional[Path] = LOG_FILE_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """
    Scan once, then rank queries typed at the prompt.

    Candidates and their score tables are kept between queries. Enter an
    empty line or 'q' to quit.
    """
    config = build_source_config(roots, default_roots, max_name_length, follow_symlinks)
    orchestrator = create_orchestrator(
        config, scorer, workers, limit, min_score, log_file, verbose
    )

    try:
        summaries = orchestrator.interactive()
        if verbose:
            console.print(f"[dim]Ranked {len(summaries)} quer{'y' if len(summaries) == 1 else 'ies'}.[/dim]")

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user.[/yellow]")
        raise typer.Exit(130)

    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _format_value(value: float) -> str:
    if value == LOWEST_SCORE:
        return "unmatchable"
    return f"{value:g}"


if __name__ == "__main__":
    app()
