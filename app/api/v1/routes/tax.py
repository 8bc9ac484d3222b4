# app/api/v1/routes/tax.py
"""Tax calculators: advance tax instalments, capital gains and GST."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from app.api.v1.deps import resolve_assessment_year
from app.api.v1.envelope import ok
from app.api.v1.schemas.tax import (
    AdvanceTaxRequest,
    AdvanceTaxResponse,
    CapitalGainsRequest,
    CapitalGainsResponse,
    GstRequest,
    GstResponse,
)
from app.domain.services.advance_tax import calculate_advance_tax
from app.domain.services.capital_gains import calculate_capital_gains
from app.domain.services.gst import calculate_gst

logger = logging.getLogger("api.v1.tax")

router = APIRouter(prefix="/calculators", tags=["Tax"])


@router.post("/advance-tax", response_model=dict)
async def advance_tax(body: AdvanceTaxRequest):
    """
    Advance tax due on 15 June, 15 September, 15 December and 15 March.

    Presumptive taxpayers pay the whole amount by 15 March.
    """
    params = body.model_dump()
    params["assessment_year"] = resolve_assessment_year(body.assessment_year)
    result = calculate_advance_tax(**params)
    message = None if result.advance_tax_required else "Net tax below Rs 10,000; advance tax not required"
    return ok(data=AdvanceTaxResponse.model_validate(result).model_dump(), message=message)


@router.post("/capital-gains", response_model=dict)
async def capital_gains(body: CapitalGainsRequest):
    result = calculate_capital_gains(**body.model_dump())
    logger.debug("%s capital gain on %s held %s days", result.gain_type, result.asset_type, result.holding_days)
    return ok(data=CapitalGainsResponse.model_validate(result).model_dump())


@router.post("/gst", response_model=dict)
async def gst(body: GstRequest):
    """GST on an amount given exclusive or inclusive of tax."""
    result = calculate_gst(**body.model_dump())
    return ok(data=GstResponse.model_validate(result).model_dump())
