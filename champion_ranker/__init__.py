"""
Champion Ranker - rule-based champion selection with tie groups

Folds an ordered list of competitors, scored by strength and age, into the
current champion and the set of competitors tied with it.
"""

from .exceptions import ConfigurationError, ValidationError
from .interfaces import Ranker
from .models import DEFAULT_COMPETITOR, Competitor, RankingResult
from .predicates import is_equal_rank, is_stronger, is_younger
from .rankers.champion_ranker import ChampionRanker, RankerConfig, rank
from .rosters import ROSTERS, SAMPLE_ROSTER, get_roster

__version__ = "0.1.0"
__all__ = [
    "Competitor",
    "RankingResult",
    "DEFAULT_COMPETITOR",
    "Ranker",
    "ChampionRanker",
    "RankerConfig",
    "rank",
    "is_stronger",
    "is_younger",
    "is_equal_rank",
    "ROSTERS",
    "SAMPLE_ROSTER",
    "get_roster",
    "ValidationError",
    "ConfigurationError",
]
