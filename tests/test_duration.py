"""Duration value type tests."""

import dataclasses

import pytest

from pyisoduration import Duration


class TestDuration:
    def test_defaults_are_zero(self):
        d = Duration()
        assert (d.years, d.months, d.weeks, d.days) == (0, 0, 0, 0)
        assert (d.hours, d.minutes, d.seconds) == (0, 0, 0)

    def test_is_frozen(self):
        d = Duration(days=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            d.days = 2

    def test_value_equality(self):
        assert Duration(hours=1) == Duration(hours=1)
        assert Duration(hours=1) != Duration(minutes=60)

    def test_hashable(self):
        assert len({Duration(days=1), Duration(days=1)}) == 1

    def test_negative_component(self):
        with pytest.raises(ValueError, match="seconds"):
            Duration(seconds=-1)
