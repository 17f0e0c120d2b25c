"""Distance unit symbols and their conversion factors.

Every supported unit is expressed as the number of meters equal to one unit
of that symbol. Meters are the pivot for all conversions.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType


class DistanceUnit(StrEnum):
    """Supported linear distance units."""

    METER = "m"
    KILOMETER = "km"
    MILE = "mi"
    FOOT = "ft"
    YARD = "yd"
    INCH = "in"
    CENTIMETER = "cm"
    MILLIMETER = "mm"


# Meters per unit. International yard and pound agreement (1959) values.
METERS_PER_UNIT: Mapping[str, float] = MappingProxyType(
    {
        DistanceUnit.METER: 1.0,
        DistanceUnit.KILOMETER: 1000.0,
        DistanceUnit.MILE: 1609.344,
        DistanceUnit.FOOT: 0.3048,
        DistanceUnit.YARD: 0.9144,
        DistanceUnit.INCH: 0.0254,
        DistanceUnit.CENTIMETER: 0.01,
        DistanceUnit.MILLIMETER: 0.001,
    }
)

UNIT_NAMES: Mapping[str, str] = MappingProxyType(
    {
        DistanceUnit.METER: "meter",
        DistanceUnit.KILOMETER: "kilometer",
        DistanceUnit.MILE: "mile",
        DistanceUnit.FOOT: "foot",
        DistanceUnit.YARD: "yard",
        DistanceUnit.INCH: "inch",
        DistanceUnit.CENTIMETER: "centimeter",
        DistanceUnit.MILLIMETER: "millimeter",
    }
)
