# app/domain/services/lap.py
"""
Loan Against Property eligibility.

The eligible amount is the lower of the property-based limit (loan-to-value)
and the income-based limit (the loan whose EMI fits within the share of
income left after existing EMIs).
"""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.services.loan_emi import calculate_emi

DEFAULT_LTV = 0.65
DEFAULT_FOIR = 0.50


@dataclass
class LapResult:
    max_loan_by_property: float
    max_permissible_emi: float
    max_loan_by_income: float
    eligible_loan: float
    monthly_emi: float
    total_interest: float
    is_eligible: bool


def loan_for_emi(emi: float, annual_rate: float, tenure_months: int) -> float:
    """Principal serviceable by *emi* over *tenure_months* (present value of the EMIs)."""
    if emi <= 0:
        return 0.0
    i = annual_rate / 12 / 100
    if i == 0:
        return emi * tenure_months
    factor = (1 + i) ** tenure_months
    return emi * (factor - 1) / (i * factor)


def calculate_lap(
    property_value: float,
    monthly_income: float,
    existing_emi: float = 0.0,
    tenure_years: int = 15,
    annual_rate: float = 10.5,
    ltv_ratio: float = DEFAULT_LTV,
    foir: float = DEFAULT_FOIR,
) -> LapResult:
    if property_value <= 0 or monthly_income <= 0:
        raise ValueError("property_value and monthly_income must be positive")
    if existing_emi < 0 or annual_rate < 0 or tenure_years <= 0:
        raise ValueError("existing_emi and rate must be non-negative, tenure positive")
    if not 0 < ltv_ratio <= 1 or not 0 < foir <= 1:
        raise ValueError("ltv_ratio and foir must be fractions in (0, 1]")

    months = tenure_years * 12
    by_property = property_value * ltv_ratio
    permissible_emi = monthly_income * foir - existing_emi
    by_income = loan_for_emi(permissible_emi, annual_rate, months)

    eligible = max(min(by_property, by_income), 0.0)
    emi = calculate_emi(eligible, annual_rate, months) if eligible > 0 else 0.0

    return LapResult(
        max_loan_by_property=by_property,
        max_permissible_emi=permissible_emi,
        max_loan_by_income=by_income,
        eligible_loan=eligible,
        monthly_emi=emi,
        total_interest=emi * months - eligible,
        is_eligible=eligible > 0 and emi > 0,
    )
