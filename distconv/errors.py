"""Exceptions raised by distance conversions."""

from __future__ import annotations

from enum import StrEnum


class UnitRole(StrEnum):
    """Which side of a conversion a unit symbol was given for."""

    SOURCE = "source"
    DESTINATION = "destination"


class ConversionError(ValueError):
    """Base class for conversion input failures."""


class InvalidValueError(ConversionError):
    """The quantity to convert is not a real number, or is NaN."""


class UnsupportedUnitError(ConversionError):
    """A unit symbol is not in the distance table."""

    def __init__(self, unit: object, role: UnitRole) -> None:
        self.unit = unit
        self.role = role
        super().__init__(f"Unsupported distance unit: {unit} ({role} unit)")
