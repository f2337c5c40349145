"""
Abstract base classes defining the interfaces for the champion ranker.

All interfaces are synchronous; a ranking pass is a pure in-memory fold.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from .models import Competitor, RankingResult


class Ranker(ABC):
    """Interface for picking a champion out of a list of competitors."""

    @abstractmethod
    def rank(self, competitors: Iterable[Competitor]) -> RankingResult:
        """
        Fold competitors, in order, into a ranking result.

        Args:
            competitors: Competitors to rank; may be empty

        Returns:
            RankingResult with the champion and its tie group
        """
        pass
