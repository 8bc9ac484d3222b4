# app/api/v1/routes/loans.py
"""Loan calculators: EMI for each loan product and loan-against-property eligibility."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from app.api.v1.envelope import ok
from app.api.v1.schemas.loans import LapRequest, LapResponse, LoanRequest, LoanResponse
from app.domain.services.lap import calculate_lap
from app.domain.services.loan_emi import calculate_loan

logger = logging.getLogger("api.v1.loans")

router = APIRouter(prefix="/calculators", tags=["Loans"])


def _loan(loan_type: str, body: LoanRequest) -> dict:
    result = calculate_loan(loan_type, **body.model_dump())
    logger.debug("%s loan over %s months: EMI %.2f", loan_type, result.tenure_months, result.monthly_emi)
    return ok(data=LoanResponse.model_validate(result).model_dump())


@router.post("/loan-emi", response_model=dict)
async def loan_emi(body: LoanRequest):
    """EMI, total interest and yearly amortization for any loan."""
    return _loan("generic", body)


@router.post("/home-loan", response_model=dict)
async def home_loan(body: LoanRequest):
    """Home loan EMI plus processing fee, stamp duty and registration charges."""
    return _loan("home", body)


@router.post("/car-loan", response_model=dict)
async def car_loan(body: LoanRequest):
    return _loan("car", body)


@router.post("/personal-loan", response_model=dict)
async def personal_loan(body: LoanRequest):
    return _loan("personal", body)


@router.post("/education-loan", response_model=dict)
async def education_loan(body: LoanRequest):
    return _loan("education", body)


@router.post("/lap", response_model=dict)
async def loan_against_property(body: LapRequest):
    """Eligible loan against property: lower of LTV limit and income-based limit."""
    result = calculate_lap(**body.model_dump())
    if not result.is_eligible:
        logger.info("LAP request not eligible")
    return ok(data=LapResponse.model_validate(result).model_dump())
