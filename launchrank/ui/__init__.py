"""Terminal UI package for launchrank."""

from .rank_tui import RankTUI

__all__ = ["RankTUI"]
