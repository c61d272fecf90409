"""Clamped local-alignment scoring for candidate names.

The score of a query prefix of length ``i`` against a name prefix of length
``j`` is:

    align(i, j) = max(0,
                      align(i, j - 1) + GAP_PENALTY,
                      align(i - 1, j) + GAP_PENALTY,
                      align(i - 1, j - 1) + (MATCH_BONUS or MISMATCH_PENALTY))

with ``align(0, j) == align(i, 0) == 0``. Scores never go negative, so a
leading run of mismatches is discounted instead of accumulated.

Tables are lists of rows indexed ``[i - 1][j - 1]``. Unset cells hold
``LOWEST_SCORE`` and are filled bottom-up, row by row, so no recursion is
involved regardless of name length.

Example:
    >>> from launchrank.matching.alignment import alignment_score
    >>> alignment_score("abc", "abc")
    9.0
"""

from typing import List

MATCH_BONUS = 3.0
MISMATCH_PENALTY = -3.0
GAP_PENALTY = -2.0

# Marks unset cells and unmatchable candidates; sorts after every real score
LOWEST_SCORE = float("-inf")

AlignmentTable = List[List[float]]


def new_alignment_table(size: int) -> AlignmentTable:
    """Create a ``size x size`` table with every cell unset.

    Args:
        size: Side length, normally the length of the candidate name.

    Returns:
        List of ``size`` rows, each holding ``size`` sentinel values.
    """
    return [[LOWEST_SCORE] * size for _ in range(size)]


def fill_alignment_table(
    query: str, name: str, table: AlignmentTable, start_row: int = 0
) -> None:
    """Fill the rows of ``table`` needed to score ``query`` against ``name``.

    Rows ``start_row`` to ``len(query) - 1`` are computed across every name
    prefix. Cells that already hold a finite value are left untouched, and
    rows before ``start_row`` must already be complete for ``query``.

    Args:
        query: Query string.
        name: Candidate name the table belongs to.
        table: Table created by new_alignment_table(len(name)).
        start_row: First row to compute.

    Raises:
        ValueError: If the query does not fit in the table.
    """
    rows = len(query)
    cols = len(name)
    if rows > len(table):
        raise ValueError(
            f"Query of length {rows} does not fit a table of side {len(table)}"
        )

    for i in range(start_row, rows):
        row = table[i]
        above = table[i - 1] if i > 0 else None
        query_char = query[i]

        for j in range(cols):
            if row[j] != LOWEST_SCORE:
                continue

            left = row[j - 1] if j > 0 else 0.0
            up = above[j] if above is not None else 0.0
            if above is not None and j > 0:
                diagonal = above[j - 1]
            else:
                diagonal = 0.0

            if query_char == name[j]:
                diagonal += MATCH_BONUS
            else:
                diagonal += MISMATCH_PENALTY

            row[j] = max(0.0, left + GAP_PENALTY, up + GAP_PENALTY, diagonal)


def alignment_score(query: str, name: str) -> float:
    """Score the full query against the full name.

    Returns:
        ``align(len(query), len(name))``; 0 when either string is empty and
        LOWEST_SCORE when the query is longer than the name.
    """
    if not query or not name:
        return 0.0
    if len(query) > len(name):
        return LOWEST_SCORE

    table = new_alignment_table(len(name))
    fill_alignment_table(query, name, table)
    return table[len(query) - 1][len(name) - 1]


def best_prefix_score(query: str, name: str) -> float:
    """Best score of the whole query against any prefix of the name."""
    if len(query) > len(name):
        return LOWEST_SCORE
    if not query:
        return 0.0

    table = new_alignment_table(len(name))
    fill_alignment_table(query, name, table)
    return max(table[len(query) - 1])
