"""
Ranker implementations.

Provides implementations of the Ranker interface for picking a champion
out of a sequence of competitors.

Available implementations:
- ChampionRanker: rule-based left-to-right fold with tie groups
"""

from .champion_ranker import ChampionRanker, RankerConfig, rank

__all__ = ["ChampionRanker", "RankerConfig", "rank"]
