"""Convert linear distances between units, pivoting through meters."""

from __future__ import annotations

from numbers import Real

import numpy as np
from numpy.typing import ArrayLike

from distconv.constants import METERS_PER_UNIT
from distconv.errors import InvalidValueError, UnitRole, UnsupportedUnitError

# numpy dtype kinds accepted by convert_array: signed, unsigned, float
_NUMERIC_KINDS = frozenset("iuf")


def supported_units() -> list[str]:
    """Return the supported unit symbols in table order."""
    return [str(unit) for unit in METERS_PER_UNIT]


def is_supported(unit: object) -> bool:
    """Return True if ``unit`` is a known distance unit symbol."""
    return isinstance(unit, str) and unit in METERS_PER_UNIT


def _factor(unit: object, role: UnitRole) -> float:
    """Look up meters-per-unit, raising UnsupportedUnitError on a miss."""
    if not is_supported(unit):
        raise UnsupportedUnitError(unit, role)
    return METERS_PER_UNIT[unit]  # type: ignore[index]


def _validate_value(value: object) -> None:
    # bool is an Integral, but not a quantity
    if isinstance(value, bool) or not isinstance(value, Real):
        msg = f"Value must be a valid number, got {type(value).__name__}"
        raise InvalidValueError(msg)
    if value != value:  # NaN
        msg = "Value must be a valid number, got NaN"
        raise InvalidValueError(msg)
    try:
        float(value)
    except OverflowError as exc:
        msg = f"Value is too large to convert: {exc}"
        raise InvalidValueError(msg) from exc


def convert(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a distance from one unit to another.

    The value is multiplied into meters and then divided into the target
    unit.  When both symbols are identical the value is returned untouched,
    so a no-op conversion never picks up floating-point error.

    Args:
        value: Quantity to convert.  Infinities are accepted, NaN is not.
        from_unit: Source unit symbol (e.g. ``"km"``).
        to_unit: Destination unit symbol (e.g. ``"mi"``).

    Returns:
        The quantity expressed in ``to_unit``.

    Raises:
        InvalidValueError: ``value`` is not a real number or is NaN.
        UnsupportedUnitError: either symbol is not a known unit.  The error
            records the symbol and whether it was the source or destination.
    """
    _validate_value(value)

    if from_unit == to_unit:
        return value

    from_factor = _factor(from_unit, UnitRole.SOURCE)
    to_factor = _factor(to_unit, UnitRole.DESTINATION)

    value_in_meters = value * from_factor
    return value_in_meters / to_factor


def convert_array(values: ArrayLike, from_unit: str, to_unit: str) -> np.ndarray:
    """Vectorised :func:`convert` over an array of distances.

    Each element of the result equals ``convert(element, from_unit, to_unit)``.
    The input is never modified; a new float64 array is always returned.

    Raises:
        InvalidValueError: ``values`` is not numeric or contains NaN.
        UnsupportedUnitError: either symbol is not a known unit.
    """
    try:
        arr = np.asarray(values)
    except (TypeError, ValueError) as exc:
        msg = f"Values must be numeric: {exc}"
        raise InvalidValueError(msg) from exc

    if arr.dtype.kind not in _NUMERIC_KINDS:
        msg = f"Values must be numeric, got dtype {arr.dtype}"
        raise InvalidValueError(msg)

    arr = arr.astype(np.float64, copy=True)
    if np.isnan(arr).any():
        msg = "Values must be valid numbers, got NaN"
        raise InvalidValueError(msg)

    if from_unit == to_unit:
        return arr

    from_factor = _factor(from_unit, UnitRole.SOURCE)
    to_factor = _factor(to_unit, UnitRole.DESTINATION)

    return (arr * from_factor) / to_factor
