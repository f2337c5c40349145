"""
Built-in rosters.

The sample roster is the eight-player list the original demo shipped with;
the other rosters are reference scenarios with known outcomes.
"""

from .exceptions import ConfigurationError
from .models import Competitor

SAMPLE_ROSTER: tuple[Competitor, ...] = tuple(
    Competitor(strength=1, age=0, name=name)
    for name in (
        "Sherlock",
        "Magnus",
        "Francis",
        "Eric Lensherr",
        "Charles Xavier",
        "Moriarty",
        "Félix",
        "Danil Dubov",
    )
)

CLEAR_LEADER_ROSTER: tuple[Competitor, ...] = (
    Competitor(3100, 33, "Sherlock"),
    Competitor(3000, 32, "Magnus"),
    Competitor(2999, 24, "Francis"),
    Competitor(2999, 24, "Moriarty"),
    Competitor(700, 30, "Félix"),
    Competitor(2700, 31, "Erik Lehnsherr"),
    Competitor(2800, 30, "Charles Xavier"),
)

YOUNGER_LEADER_ROSTER: tuple[Competitor, ...] = (
    Competitor(3000, 33, "Sherlock"),
    *CLEAR_LEADER_ROSTER[1:],
)

TWO_WAY_TIE_ROSTER: tuple[Competitor, ...] = (
    Competitor(3000, 30, "Kareem"),
    Competitor(3000, 30, "Lebron"),
    Competitor(2900, 30, "Boo"),
    Competitor(2999, 24, "Moriarty"),
    Competitor(700, 30, "Félix"),
    Competitor(2700, 31, "Michael"),
    Competitor(2800, 30, "Karl"),
)

THREE_WAY_TIE_ROSTER: tuple[Competitor, ...] = (
    *TWO_WAY_TIE_ROSTER[:2],
    Competitor(3000, 30, "Boo"),
    *TWO_WAY_TIE_ROSTER[3:],
)

ROSTERS: dict[str, tuple[Competitor, ...]] = {
    "sample": SAMPLE_ROSTER,
    "clear-leader": CLEAR_LEADER_ROSTER,
    "younger-leader": YOUNGER_LEADER_ROSTER,
    "two-way-tie": TWO_WAY_TIE_ROSTER,
    "three-way-tie": THREE_WAY_TIE_ROSTER,
}


def get_roster(name: str) -> tuple[Competitor, ...]:
    """Look up a built-in roster by name."""
    if name not in ROSTERS:
        raise ConfigurationError(
            f"Unknown roster: {name!r} (available: {', '.join(sorted(ROSTERS))})"
        )
    return ROSTERS[name]
