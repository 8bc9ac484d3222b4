# app/api/v1/routes/salary.py
"""Salary calculators: gratuity, HRA exemption, TDS, EPF and take-home pay."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from app.api.v1.deps import resolve_assessment_year
from app.api.v1.envelope import ok
from app.api.v1.schemas.salary import (
    EpfRequest,
    EpfResponse,
    GratuityRequest,
    GratuityResponse,
    HraRequest,
    HraResponse,
    TakeHomeRequest,
    TakeHomeResponse,
    TdsRequest,
    TdsResponse,
)
from app.domain.services.epf import calculate_epf
from app.domain.services.gratuity import calculate_gratuity
from app.domain.services.hra import calculate_hra_exemption
from app.domain.services.take_home_salary import calculate_take_home_salary
from app.domain.services.tds import calculate_tds

logger = logging.getLogger("api.v1.salary")

router = APIRouter(prefix="/calculators", tags=["Salary"])


@router.post("/gratuity", response_model=dict)
async def gratuity(body: GratuityRequest):
    """Gratuity payable and its exemption u/s 10(10)."""
    result = calculate_gratuity(**body.model_dump())
    return ok(data=GratuityResponse.model_validate(result).model_dump())


@router.post("/hra", response_model=dict)
async def hra(body: HraRequest):
    """HRA exemption u/s 10(13A); amounts in the response are annual."""
    result = calculate_hra_exemption(**body.model_dump())
    return ok(data=HraResponse.model_validate(result).model_dump())


@router.post("/tds", response_model=dict)
async def tds(body: TdsRequest):
    params = body.model_dump()
    params["assessment_year"] = resolve_assessment_year(body.assessment_year)
    result = calculate_tds(**params)
    if result.higher_rate_applied:
        logger.info("TDS u/s %s at higher rate %s%% (no PAN)", result.section, result.rate)
    return ok(data=TdsResponse.model_validate(result).model_dump())


@router.post("/epf", response_model=dict)
async def epf(body: EpfRequest):
    """EPF balance at retirement with the monthly employee, employer and EPS split."""
    result = calculate_epf(**body.model_dump())
    return ok(data=EpfResponse.model_validate(result).model_dump())


@router.post("/take-home-salary", response_model=dict)
async def take_home_salary(body: TakeHomeRequest):
    """Annual and monthly in-hand salary after income tax, EPF and professional tax."""
    params = body.model_dump()
    params["assessment_year"] = resolve_assessment_year(body.assessment_year)
    result = calculate_take_home_salary(**params)
    return ok(data=TakeHomeResponse.model_validate(result).model_dump())
