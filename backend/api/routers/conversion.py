"""Distance conversion and unit listing endpoints."""

from __future__ import annotations

import logging
import math
from typing import Annotated, NoReturn

import numpy as np
from fastapi import APIRouter, Depends, HTTPException, Query

from backend.api.config import Settings
from backend.api.dependencies import get_settings
from backend.api.schemas.conversion import (
    BatchConversionRequest,
    BatchConversionResponse,
    ConversionResponse,
    UnitSchema,
)
from distconv.constants import METERS_PER_UNIT, UNIT_NAMES
from distconv.converter import convert, convert_array

logger = logging.getLogger(__name__)

router = APIRouter()


def _reject_non_finite() -> NoReturn:
    """Raise 422: JSON has no representation for infinite values."""
    logger.warning("Rejected conversion with a non-finite value or result")
    raise HTTPException(status_code=422, detail="Value and result must be finite numbers")


@router.get("/units")
async def list_units() -> list[UnitSchema]:
    """List every supported unit with its meters-per-unit factor."""
    return [
        UnitSchema(symbol=str(symbol), name=UNIT_NAMES[symbol], meters_per_unit=factor)
        for symbol, factor in METERS_PER_UNIT.items()
    ]


@router.get("/convert")
async def convert_value(
    value: float,
    from_unit: Annotated[str, Query(alias="from")],
    to_unit: Annotated[str, Query(alias="to")],
) -> ConversionResponse:
    """Convert a single distance.

    Unsupported units and NaN values surface as 422 through the app's
    ``ConversionError`` handler.  Infinite values or results are also 422,
    since they cannot be written as JSON numbers.
    """
    result = convert(value, from_unit, to_unit)
    if not (math.isfinite(value) and math.isfinite(result)):
        _reject_non_finite()
    return ConversionResponse(value=value, from_unit=from_unit, to_unit=to_unit, result=result)


@router.post("/convert/batch")
async def convert_batch(
    body: BatchConversionRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> BatchConversionResponse:
    """Convert a list of distances between one pair of units."""
    if len(body.values) > settings.max_batch_size:
        logger.warning(
            "Rejected batch of %d values (limit %d)", len(body.values), settings.max_batch_size
        )
        raise HTTPException(
            status_code=413,
            detail=f"Batch exceeds {settings.max_batch_size} values",
        )

    results = convert_array(body.values, body.from_unit, body.to_unit)
    if not np.isfinite(results).all():
        _reject_non_finite()
    return BatchConversionResponse(
        from_unit=body.from_unit,
        to_unit=body.to_unit,
        results=results.tolist(),
    )
