"""
Core dataclasses for the champion ranker.

Defines the Competitor value record and the RankingResult produced by a
ranking pass, with validation.
"""

from dataclasses import dataclass, field

from .exceptions import ValidationError


@dataclass(frozen=True)
class Competitor:
    """A ranked entity. Equality and hashing cover all three fields."""

    strength: int = 0
    age: int = 0
    name: str = ""

    def __post_init__(self) -> None:
        """Validate competitor data."""
        for attr in ("strength", "age"):
            value = getattr(self, attr)
            # bool is an int subclass but never a meaningful rank
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(f"{attr} must be an integer, got {value!r}")
            if value < 0:
                raise ValidationError(f"{attr} cannot be negative, got {value}")
        if not isinstance(self.name, str):
            raise ValidationError(f"name must be a string, got {self.name!r}")


DEFAULT_COMPETITOR = Competitor()


@dataclass(frozen=True)
class RankingResult:
    """Outcome of a ranking pass: the champion and the competitors tied with it."""

    champion: Competitor = DEFAULT_COMPETITOR
    tied_champions: frozenset[Competitor] = field(default_factory=frozenset)

    @property
    def has_ties(self) -> bool:
        """True when at least one tie group survived the fold."""
        return bool(self.tied_champions)

    def tied_names(self) -> list[str]:
        """Names of the tied champions, sorted for display."""
        return sorted(competitor.name for competitor in self.tied_champions)
