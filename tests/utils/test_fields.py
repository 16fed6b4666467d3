"""
Tests for provider payload helpers.
"""

import math

import pytest

from weather_lookup.schemas import weather
from weather_lookup.utils.fields import Number, as_number, dig, round_half_up, within


class TestDig:
    """Test cases for dig."""

    def test_nested_path(self):
        data = {"weather": [{"main": "Rain"}], "main": {"temp": 3}}

        assert dig(data, "weather", 0, "main") == "Rain"
        assert dig(data, "main", "temp") == 3

    @pytest.mark.parametrize(
        "data, path",
        [
            ({}, ("main", "temp")),
            ({"main": None}, ("main", "temp")),
            ({"weather": []}, ("weather", 0, "main")),
            ({"weather": {"0": "x"}}, ("weather", 0)),
            ({"main": [1, 2]}, ("main", "temp")),
            (None, ("name",)),
        ],
    )
    def test_missing_or_wrong_shape(self, data, path):
        assert dig(data, *path) is None

    def test_falsy_leaf_preserved(self):
        assert dig({"wind": {"deg": 0}}, "wind", "deg") == 0


class TestNumbers:
    """Test cases for numeric helpers."""

    @pytest.mark.parametrize("value", [None, "12", True, math.nan, math.inf])
    def test_as_number_rejects(self, value):
        assert as_number(value) is None

    @pytest.mark.parametrize("value", [0, 12, -3.5])
    def test_as_number_accepts(self, value):
        assert as_number(value) == value

    @pytest.mark.parametrize(
        "value, expected",
        [(2.5, 3), (-2.5, -2), (14.49, 14), (-0.6, -1), (7, 7), ("7", None), (None, None)],
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    @pytest.mark.parametrize(
        "value, low, high, expected",
        [(50, 0, 100, 50), (0, 0, 360, 0), (360, 0, 360, 360), (-1, 0, None, None),
         (101, 0, 100, None), ("5", 0, 10, None), (None, 0, 10, None)],
    )
    def test_within(self, value, low, high, expected):
        assert within(value, low, high) == expected

    def test_schemas_share_number_alias(self):
        assert weather.Number is Number
