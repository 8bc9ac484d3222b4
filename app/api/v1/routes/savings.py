# app/api/v1/routes/savings.py
"""
Savings and investment calculators: compound interest, SIP, lumpsum, PPF,
RD, FD, NPS and retirement planning.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from app.api.v1.envelope import ok
from app.api.v1.schemas.savings import (
    CompoundInterestRequest,
    CompoundInterestResponse,
    FdRequest,
    FdResponse,
    LumpsumRequest,
    LumpsumResponse,
    NpsRequest,
    NpsResponse,
    PpfRequest,
    PpfResponse,
    RdRequest,
    RdResponse,
    RetirementRequest,
    RetirementResponse,
    SipRequest,
    SipResponse,
)
from app.domain.services.compound_interest import calculate_compound_interest
from app.domain.services.deposits import calculate_fd, calculate_rd
from app.domain.services.nps import calculate_nps
from app.domain.services.ppf import calculate_ppf
from app.domain.services.retirement import calculate_retirement
from app.domain.services.sip import calculate_lumpsum, calculate_sip

logger = logging.getLogger("api.v1.savings")

router = APIRouter(prefix="/calculators", tags=["Savings & Investments"])


@router.post("/compound-interest", response_model=dict)
async def compound_interest(body: CompoundInterestRequest):
    """Compound interest with optional periodic contributions and a yearly table."""
    result = calculate_compound_interest(**body.model_dump())
    return ok(data=CompoundInterestResponse.model_validate(result).model_dump())


@router.post("/sip", response_model=dict)
async def sip(body: SipRequest):
    result = calculate_sip(**body.model_dump())
    return ok(data=SipResponse.model_validate(result).model_dump())


@router.post("/lumpsum", response_model=dict)
async def lumpsum(body: LumpsumRequest):
    result = calculate_lumpsum(**body.model_dump())
    return ok(data=LumpsumResponse.model_validate(result).model_dump())


@router.post("/ppf", response_model=dict)
async def ppf(body: PpfRequest):
    """PPF maturity; deposits outside Rs 500 - Rs 1,50,000 are clamped."""
    result = calculate_ppf(**body.model_dump())
    message = "Deposits were adjusted to the Rs 500 - Rs 1,50,000 yearly limit" if result.clamped else None
    return ok(data=PpfResponse.model_validate(result).model_dump(), message=message)


@router.post("/rd", response_model=dict)
async def recurring_deposit(body: RdRequest):
    result = calculate_rd(**body.model_dump())
    return ok(data=RdResponse.model_validate(result).model_dump())


@router.post("/fd", response_model=dict)
async def fixed_deposit(body: FdRequest):
    result = calculate_fd(**body.model_dump())
    return ok(data=FdResponse.model_validate(result).model_dump())


@router.post("/nps", response_model=dict)
async def nps(body: NpsRequest):
    """NPS corpus at retirement, lump sum and monthly pension from the annuity."""
    result = calculate_nps(**body.model_dump())
    return ok(data=NpsResponse.model_validate(result).model_dump())


@router.post("/retirement", response_model=dict)
async def retirement(body: RetirementRequest):
    """Corpus required at retirement versus the projected corpus."""
    result = calculate_retirement(**body.model_dump())
    if result.shortfall > 0:
        logger.debug("Retirement shortfall %.0f; top-up SIP %.0f", result.shortfall, result.additional_monthly_investment)
    return ok(data=RetirementResponse.model_validate(result).model_dump())
