"""Candidate discovery package for launchrank.

This package provides the CandidateSource class, which walks configured
search roots and classifies each entry as an executable or a plain file.

Example:
    >>> from launchrank.models import SourceConfig
    >>> from launchrank.scanning import CandidateSource
    >>> from pathlib import Path
    >>>
    >>> source = CandidateSource(SourceConfig(roots=[Path("/usr/share/applications")]))
    >>> candidates = source.collect()
    >>> errors = source.get_errors()
"""

from .candidate_source import EXECUTE_BITS, CandidateSource

__all__ = ["CandidateSource", "EXECUTE_BITS"]
