"""
Tests for Competitor and RankingResult models.

Focus on validation, structural equality and hashing.
"""

import dataclasses

import pytest

from champion_ranker.exceptions import ValidationError
from champion_ranker.models import DEFAULT_COMPETITOR, Competitor, RankingResult


class TestCompetitor:
    """Test Competitor value semantics and validation."""

    def test_default_competitor_is_zero_valued(self) -> None:
        """Competitor() is the (0, 0, "") default record."""
        assert Competitor() == DEFAULT_COMPETITOR
        assert DEFAULT_COMPETITOR.strength == 0
        assert DEFAULT_COMPETITOR.age == 0
        assert DEFAULT_COMPETITOR.name == ""

    def test_equality_and_hash_cover_all_fields(self) -> None:
        """Same fields collapse in a set; a different name does not."""
        a = Competitor(3000, 30, "Kareem")
        a_again = Competitor(3000, 30, "Kareem")
        b = Competitor(3000, 30, "Lebron")

        assert a == a_again
        assert hash(a) == hash(a_again)
        assert {a, a_again, b} == {a, b}

    def test_competitor_is_immutable(self) -> None:
        """Competitors are frozen value records."""
        competitor = Competitor(3000, 30, "Kareem")

        with pytest.raises(dataclasses.FrozenInstanceError):
            competitor.strength = 1  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"strength": -1, "age": 30, "name": "negative strength"},
            {"strength": 100, "age": -5, "name": "negative age"},
            {"strength": 1.5, "age": 30, "name": "float strength"},
            {"strength": True, "age": 30, "name": "bool strength"},
            {"strength": 100, "age": "30", "name": "string age"},
            {"strength": 100, "age": 30, "name": None},
        ],
    )
    def test_rejects_invalid_fields(self, kwargs: dict[str, object]) -> None:
        """Invalid field values raise ValidationError."""
        with pytest.raises(ValidationError):
            Competitor(**kwargs)  # type: ignore[arg-type]


class TestRankingResult:
    """Test RankingResult helpers."""

    def test_empty_result(self) -> None:
        """Default result holds the default champion and no ties."""
        result = RankingResult()

        assert result.champion == DEFAULT_COMPETITOR
        assert result.tied_champions == frozenset()
        assert not result.has_ties
        assert result.tied_names() == []

    def test_tied_names_sorted(self) -> None:
        """tied_names is sorted regardless of set iteration order."""
        lebron = Competitor(3000, 30, "Lebron")
        kareem = Competitor(3000, 30, "Kareem")
        result = RankingResult(champion=lebron, tied_champions=frozenset({lebron, kareem}))

        assert result.has_ties
        assert result.tied_names() == ["Kareem", "Lebron"]
