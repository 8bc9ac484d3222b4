# app/api/v1/schemas/common.py
"""Shared field types for calculator responses."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer

# Amounts are serialized rounded to paise
Money = Annotated[float, PlainSerializer(lambda v: round(v, 2), return_type=float)]
Amount = Annotated[Decimal, PlainSerializer(lambda v: float(round(v, 2)), return_type=float)]
Percent = Annotated[float, PlainSerializer(lambda v: round(v, 2), return_type=float)]


class ResultSchema(BaseModel):
    """Response model populated from a service-layer dataclass."""

    model_config = ConfigDict(from_attributes=True)
