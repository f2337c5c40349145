"""
Tests for the comparison predicates.

Focus on strictness: ties never count as stronger or younger.
"""

from champion_ranker.models import Competitor
from champion_ranker.predicates import is_equal_rank, is_stronger, is_younger


class TestPredicates:
    """Test comparison predicates through public interface."""

    def test_is_stronger_is_strict(self) -> None:
        """Higher strength wins; equal strength does not."""
        strong = Competitor(3000, 40, "strong")
        weak = Competitor(2999, 20, "weak")
        twin = Competitor(3000, 20, "twin")

        assert is_stronger(strong, weak)
        assert not is_stronger(weak, strong)
        assert not is_stronger(strong, twin), "Equal strength is not stronger"

    def test_is_younger_is_strict(self) -> None:
        """Lower age is younger; equal age is not."""
        young = Competitor(100, 20, "young")
        old = Competitor(100, 30, "old")
        peer = Competitor(500, 20, "peer")

        assert is_younger(young, old)
        assert not is_younger(old, young)
        assert not is_younger(young, peer), "Equal age is not younger"

    def test_is_equal_rank_ignores_name(self) -> None:
        """Equal rank compares strength and age only."""
        a = Competitor(3000, 30, "Kareem")
        b = Competitor(3000, 30, "Lebron")

        assert is_equal_rank(a, b)
        assert a != b, "Structural equality still includes the name"

    def test_is_equal_rank_needs_both_fields(self) -> None:
        """Matching only one of strength or age is not equal rank."""
        base = Competitor(3000, 30, "base")

        assert not is_equal_rank(base, Competitor(3000, 31, "older"))
        assert not is_equal_rank(base, Competitor(2999, 30, "weaker"))
