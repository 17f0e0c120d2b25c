"""Pydantic schemas for the distance conversion endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UnitSchema(BaseModel):
    """A supported distance unit."""

    symbol: str
    name: str
    meters_per_unit: float


class ConversionResponse(BaseModel):
    """Result of converting a single value."""

    model_config = ConfigDict(populate_by_name=True)

    value: float
    from_unit: str = Field(alias="from")
    to_unit: str = Field(alias="to")
    result: float


class BatchConversionRequest(BaseModel):
    """Convert many values between the same pair of units."""

    model_config = ConfigDict(populate_by_name=True)

    values: list[float]
    from_unit: str = Field(alias="from")
    to_unit: str = Field(alias="to")


class BatchConversionResponse(BaseModel):
    """Results of a batch conversion, in input order."""

    model_config = ConfigDict(populate_by_name=True)

    from_unit: str = Field(alias="from")
    to_unit: str = Field(alias="to")
    results: list[float]
