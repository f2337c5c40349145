"""
Comparison predicates used by the rankers.

All comparisons are strict: "stronger" means a higher strength and
"younger" means a lower age. Names never take part in ranking.
"""

from .models import Competitor


def is_stronger(target: Competitor, other: Competitor) -> bool:
    """Return True if target has a strictly higher strength than other."""
    return target.strength > other.strength


def is_younger(target: Competitor, other: Competitor) -> bool:
    """Return True if target is strictly younger than other."""
    return target.age < other.age


def is_equal_rank(target: Competitor, other: Competitor) -> bool:
    """Return True if both competitors share strength and age."""
    return target.strength == other.strength and target.age == other.age
