"""
Champion ranker implementation.

Folds competitors left to right, keeping the current champion and the group
of competitors recorded as co-equal with it.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loguru import Logger

from typing_extensions import override

from ..exceptions import ConfigurationError
from ..interfaces import Ranker
from ..logging_config import get_logger
from ..models import DEFAULT_COMPETITOR, Competitor, RankingResult
from ..predicates import is_equal_rank, is_stronger, is_younger


@dataclass
class RankerConfig:
    """Configuration for a champion ranker."""

    accumulate_ties: bool = False  # check equal rank before the tie reset

    def __post_init__(self):
        """Validate configuration."""
        if not isinstance(self.accumulate_ties, bool):
            raise ConfigurationError(
                f"accumulate_ties must be a bool, got {self.accumulate_ties!r}"
            )


class ChampionRanker(Ranker):
    """
    Rule-based champion ranker.

    The first competitor always opens as champion. Each later competitor is
    checked against the running state in a fixed order:

    1. Tie reset: if a tie group exists and the competitor is not strictly
       weaker than some member, it becomes sole champion and the group is
       cleared.
    2. Equal rank: same strength and age as the champion, so both join the
       tie group.
    3. Neither weaker nor older than the champion: replaces the champion.
    4. Not weaker than the champion: replaces the champion.
    5. Otherwise nothing changes.

    Rule 1 also fires when the competitor is equal rank to the whole tie
    group, so a third co-equal competitor restarts the race on its own
    instead of extending the group. ``accumulate_ties=True`` checks rule 2
    before rule 1 to let tie groups grow past two members.

    The order matters and the fold is not commutative: permuting the input
    can change the result.
    """

    def __init__(self, accumulate_ties: bool = False):
        """
        Initialize champion ranker.

        Args:
            accumulate_ties: Let equal-rank competitors join an existing
                tie group instead of resetting it
        """
        self.accumulate_ties: bool = accumulate_ties
        self.logger: Logger = get_logger("champion_ranker")

    @classmethod
    def from_config(cls, config: RankerConfig) -> "ChampionRanker":
        """Build a ranker from a validated configuration."""
        return cls(accumulate_ties=config.accumulate_ties)

    @override
    def rank(self, competitors: Iterable[Competitor]) -> RankingResult:
        """Fold competitors into the champion and its tie group."""
        champion = DEFAULT_COMPETITOR
        tied = set[Competitor]()
        seen = 0

        for competitor in competitors:
            seen += 1

            # The placeholder is never a contender, even against (0, 0) records
            if seen == 1:
                self.logger.debug(f"{competitor.name!r} opens as champion")
                champion = competitor
                continue

            if self.accumulate_ties and is_equal_rank(competitor, champion):
                tied.update((champion, competitor))
                self.logger.debug(f"{competitor.name!r} ties {champion.name!r} ({len(tied)} tied)")
                continue

            if any(not is_stronger(member, competitor) for member in tied):
                self.logger.debug(f"{competitor.name!r} matches the tie group, resetting to sole champion")
                champion = competitor
                tied.clear()
                continue

            if is_equal_rank(competitor, champion):
                tied.update((champion, competitor))
                self.logger.debug(f"{competitor.name!r} ties {champion.name!r} ({len(tied)} tied)")
                continue

            if not is_stronger(champion, competitor) and not is_younger(champion, competitor):
                self.logger.debug(f"{competitor.name!r} replaces {champion.name!r} (not weaker, not older)")
                champion = competitor
                continue

            if not is_stronger(champion, competitor):
                self.logger.debug(f"{competitor.name!r} replaces {champion.name!r} (not weaker)")
                champion = competitor
                continue

            self.logger.debug(f"{champion.name!r} holds against {competitor.name!r}")

        self.logger.info(
            f"Ranked {seen} competitors: champion={champion.name!r}, tied={len(tied)}"
        )
        return RankingResult(champion=champion, tied_champions=frozenset(tied))


def rank(competitors: Iterable[Competitor]) -> RankingResult:
    """Rank competitors with the default rule order."""
    return ChampionRanker().rank(competitors)
