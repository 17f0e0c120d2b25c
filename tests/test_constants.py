"""Tests for distconv.constants."""

from __future__ import annotations

import math

import pytest

from distconv.constants import METERS_PER_UNIT, UNIT_NAMES, DistanceUnit


class TestMetersPerUnit:
    def test_symbol_set_is_fixed(self) -> None:
        assert set(METERS_PER_UNIT) == {"m", "km", "mi", "ft", "yd", "in", "cm", "mm"}

    def test_factors_positive_and_finite(self) -> None:
        for factor in METERS_PER_UNIT.values():
            assert factor > 0
            assert math.isfinite(factor)

    @pytest.mark.parametrize(
        ("symbol", "expected"),
        [
            ("m", 1.0),
            ("km", 1000.0),
            ("mi", 1609.344),
            ("ft", 0.3048),
            ("yd", 0.9144),
            ("in", 0.0254),
            ("cm", 0.01),
            ("mm", 0.001),
        ],
    )
    def test_factor_values(self, symbol: str, expected: float) -> None:
        assert METERS_PER_UNIT[symbol] == expected

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            METERS_PER_UNIT["m"] = 2.0  # type: ignore[index]

    def test_lookup_by_enum_and_plain_string(self) -> None:
        assert METERS_PER_UNIT[DistanceUnit.MILE] == METERS_PER_UNIT["mi"]


class TestDistanceUnit:
    def test_members_match_table(self) -> None:
        assert {str(u) for u in DistanceUnit} == set(METERS_PER_UNIT)

    def test_compares_equal_to_symbol(self) -> None:
        assert DistanceUnit.INCH == "in"

    def test_every_unit_has_a_name(self) -> None:
        assert set(UNIT_NAMES) == set(METERS_PER_UNIT)
        assert UNIT_NAMES["ft"] == "foot"
