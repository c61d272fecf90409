"""Candidate discovery from configured search roots.

This module provides the CandidateSource class, which walks every search
root recursively and turns each entry (file or directory) into a Candidate
tagged as executable or plain file.

Example:
    >>> from launchrank.models import SourceConfig
    >>> from launchrank.scanning import CandidateSource
    >>> source = CandidateSource(SourceConfig(roots=[Path("/usr/bin")]))
    >>> candidates = source.collect()
    >>> print(f"Found {len(candidates)} entries")
"""

import os
import stat
from pathlib import Path
from typing import Iterator, List, Set, Tuple

from launchrank.matching import Candidate
from launchrank.models import CandidateKind, SourceConfig

# Owner, group or other may execute
EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class CandidateSource:
    """Enumerates search roots and builds Candidate instances.

    Roots are walked top-down. Within a directory, subdirectories are listed
    before files and both are visited in sorted name order, so discovery
    order (and with it the order of tied scores) is reproducible for a given
    tree. Directory symlinks are listed but only descended into when
    ``follow_symlinks`` is enabled, in which case (device, inode) pairs are
    tracked to avoid cycles.

    Errors never abort a walk; they are collected and exposed through
    get_errors().

    Attributes:
        config: The SourceConfig being enumerated.
        _errors: List of error messages encountered during enumeration.

    Example:
        >>> source = CandidateSource(SourceConfig(roots=[Path.home()]))
        >>> for path in source.iter_entries():
        ...     print(path)
    """

    def __init__(self, config: SourceConfig) -> None:
        """Initialize the CandidateSource.

        Args:
            config: Search roots and traversal limits.
        """
        self.config = config
        self._errors: List[str] = []

    def collect(self) -> List[Candidate]:
        """Build a candidate for every entry under every root.

        Returns:
            Candidates in discovery order.
        """
        candidates: List[Candidate] = []
        for path in self.iter_entries():
            if len(path.name) > self.config.max_name_length:
                self._errors.append(
                    f"Name longer than {self.config.max_name_length} characters: {path}"
                )
                continue
            candidates.append(self.create_candidate(path))
        return candidates

    def create_candidate(self, path: Path) -> Candidate:
        """Classify ``path`` and wrap it in a Candidate."""
        return Candidate.from_path(path, kind=self.classify(path))

    def classify(self, path: Path) -> CandidateKind:
        """Classify an entry by its execute permission bits.

        The entry is executable when any of the owner, group or other execute
        bits is set. Symlinks are followed; an entry whose status cannot be
        read is treated as a plain file.

        Args:
            path: Entry to classify.

        Returns:
            CandidateKind.EXECUTABLE or CandidateKind.FILE.
        """
        try:
            mode = os.stat(path).st_mode
        except OSError as e:
            self._errors.append(f"Cannot read permissions of {path}: {e}")
            return CandidateKind.FILE

        if mode & EXECUTE_BITS:
            return CandidateKind.EXECUTABLE
        return CandidateKind.FILE

    def iter_entries(self) -> Iterator[Path]:
        """Yield every entry below the configured roots.

        The roots themselves are not yielded. Missing or non-directory roots
        are recorded as errors and skipped.
        """
        for root in self.config.roots:
            if not root.exists():
                self._errors.append(f"Search root not found: {root}")
                continue
            if not root.is_dir():
                self._errors.append(f"Search root is not a directory: {root}")
                continue

            yield from self._walk_root(root)

    def _walk_root(self, root: Path) -> Iterator[Path]:
        """Walk one root, yielding directories and files."""
        visited_dirs: Set[Tuple[int, int]] = set()
        if self.config.follow_symlinks:
            try:
                root_stat = root.stat()
                visited_dirs.add((root_stat.st_dev, root_stat.st_ino))
            except OSError as e:
                self._errors.append(f"Error accessing search root {root}: {e}")
                return

        for dirpath, dirnames, filenames in os.walk(
            root, followlinks=self.config.follow_symlinks, onerror=self._record_walk_error
        ):
            dirnames.sort()
            filenames.sort()
            current = Path(dirpath)

            for dirname in dirnames:
                yield current / dirname

            if self.config.follow_symlinks:
                dirnames[:] = self._prune_cycles(current, dirnames, visited_dirs)

            for filename in filenames:
                yield current / filename

    def _prune_cycles(
        self,
        current: Path,
        dirnames: List[str],
        visited_dirs: Set[Tuple[int, int]],
    ) -> List[str]:
        """Return the subdirectories not visited yet, marking them visited."""
        kept: List[str] = []
        for dirname in dirnames:
            try:
                dir_stat = (current / dirname).stat()
            except OSError:
                # Dangling directory symlink
                continue
            dir_id = (dir_stat.st_dev, dir_stat.st_ino)
            if dir_id in visited_dirs:
                continue
            visited_dirs.add(dir_id)
            kept.append(dirname)
        return kept

    def _record_walk_error(self, error: OSError) -> None:
        """os.walk error hook: record unreadable directories."""
        if isinstance(error, PermissionError):
            self._errors.append(f"Permission denied: {error.filename}")
        else:
            self._errors.append(f"Error scanning {error.filename}: {error}")

    def get_errors(self) -> List[str]:
        """Get list of errors encountered during enumeration.

        Returns:
            List of error message strings.
        """
        return self._errors.copy()

    def clear_errors(self) -> None:
        """Clear the list of accumulated errors."""
        self._errors.clear()

    def count_by_kind(self, candidates: List[Candidate]) -> Tuple[int, int]:
        """Return (executable_count, file_count) for ``candidates``."""
        executables = sum(1 for c in candidates if c.kind is CandidateKind.EXECUTABLE)
        return executables, len(candidates) - executables
