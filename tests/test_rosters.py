"""
Tests for the built-in rosters.
"""

import pytest

from champion_ranker.exceptions import ConfigurationError
from champion_ranker.rosters import ROSTERS, SAMPLE_ROSTER, get_roster


class TestRosters:
    """Test roster lookup and contents."""

    def test_sample_roster_contents(self) -> None:
        """Sample roster holds eight distinct players at strength 1, age 0."""
        assert len(SAMPLE_ROSTER) == 8
        assert len(set(SAMPLE_ROSTER)) == 8
        assert all(c.strength == 1 and c.age == 0 for c in SAMPLE_ROSTER)

    def test_get_roster_returns_registered_roster(self) -> None:
        """Lookup by name returns the registered tuple."""
        for name, roster in ROSTERS.items():
            assert get_roster(name) is roster

    def test_unknown_roster_raises(self) -> None:
        """Unknown names raise ConfigurationError listing the choices."""
        with pytest.raises(ConfigurationError, match="sample"):
            get_roster("no-such-roster")
