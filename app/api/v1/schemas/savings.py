# app/api/v1/schemas/savings.py
"""Request and response schemas for savings and investment calculators."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from app.api.v1.schemas.common import Money, Percent, ResultSchema


# ---------------------------------------------------------------------------
# Compound interest
# ---------------------------------------------------------------------------

class CompoundInterestRequest(BaseModel):
    principal: float = Field(default=100000, ge=0)
    annual_rate: float = Field(default=8, ge=0, le=100, description="Percent per annum")
    years: int = Field(default=10, ge=1, le=100)
    compounding: Literal["annually", "half-yearly", "quarterly", "monthly", "daily"] = "annually"
    additional_contribution: float = Field(default=0, ge=0)
    contribution_frequency: Literal["yearly", "half-yearly", "quarterly", "monthly"] = "yearly"


class CompoundInterestYearSchema(ResultSchema):
    year: int
    balance: Money
    total_interest: Money
    total_contributions: Money


class CompoundInterestResponse(ResultSchema):
    maturity_amount: Money
    total_contributions: Money
    total_interest: Money
    yearly: list[CompoundInterestYearSchema]


# ---------------------------------------------------------------------------
# SIP / Lumpsum
# ---------------------------------------------------------------------------

class SipRequest(BaseModel):
    monthly_investment: float = Field(default=5000, gt=0)
    annual_rate: float = Field(default=12, ge=0, le=100)
    years: int = Field(default=10, ge=1, le=60)
    annual_step_up: float = Field(default=0, ge=0, le=100, description="Yearly increase in the instalment, percent")


class LumpsumRequest(BaseModel):
    amount: float = Field(default=100000, gt=0)
    annual_rate: float = Field(default=12, ge=0, le=100)
    years: int = Field(default=10, ge=1, le=60)


class GrowthYearSchema(ResultSchema):
    year: int
    invested_amount: Money
    estimated_value: Money
    estimated_returns: Money


class SipResponse(ResultSchema):
    total_invested: Money
    estimated_returns: Money
    maturity_value: Money
    yearly: list[GrowthYearSchema]


class LumpsumResponse(ResultSchema):
    invested_amount: Money
    estimated_returns: Money
    maturity_value: Money
    yearly: list[GrowthYearSchema]


# ---------------------------------------------------------------------------
# PPF
# ---------------------------------------------------------------------------

class PpfRequest(BaseModel):
    initial_deposit: float = Field(default=150000, ge=0, description="First-year deposit; clamped to 500-1,50,000")
    yearly_deposit: float = Field(default=150000, ge=0, description="Deposit from year 2; clamped to 500-1,50,000")
    annual_rate: float = Field(default=7.1, ge=0, le=20)
    years: int = Field(default=15, ge=15, le=50, description="15, extendable in blocks of 5")


class PpfYearSchema(ResultSchema):
    year: int
    deposit: Money
    interest: Money
    balance: Money
    total_deposited: Money
    total_interest: Money


class PpfResponse(ResultSchema):
    maturity_amount: Money
    total_deposited: Money
    total_interest: Money
    clamped: bool
    yearly: list[PpfYearSchema]


# ---------------------------------------------------------------------------
# RD / FD
# ---------------------------------------------------------------------------

class RdRequest(BaseModel):
    monthly_deposit: float = Field(default=5000, gt=0)
    annual_rate: float = Field(default=6.5, gt=0, le=20)
    tenure_months: int = Field(default=12, ge=1, le=120)
    senior_citizen: bool = False


class RdQuarterSchema(ResultSchema):
    quarter: int
    from_month: int
    to_month: int
    deposit: Money
    total_deposit: Money
    value: Money


class RdResponse(ResultSchema):
    interest_rate: Percent
    total_deposit: Money
    maturity_amount: Money
    interest_earned: Money
    effective_yield: Percent
    quarterly: list[RdQuarterSchema]


class FdRequest(BaseModel):
    principal: float = Field(default=100000, gt=0)
    annual_rate: float = Field(default=7, ge=0, le=20)
    tenure_years: int = Field(default=1, ge=0, le=20)
    tenure_months: int = Field(default=0, ge=0, le=11)
    compounding: Literal["simple", "monthly", "quarterly", "half-yearly", "yearly"] = "quarterly"
    senior_citizen: bool = False
    apply_tds: bool = False

    @model_validator(mode="after")
    def _tenure_positive(self):
        if self.tenure_years == 0 and self.tenure_months == 0:
            raise ValueError("tenure must be at least one month")
        return self


class FdYearSchema(ResultSchema):
    year: int
    months: int
    opening_balance: Money
    interest: Money
    closing_balance: Money


class FdResponse(ResultSchema):
    interest_rate: Percent
    principal: Money
    maturity_amount: Money
    interest_earned: Money
    tds_applicable: bool
    tds_amount: Money
    maturity_after_tds: Money
    effective_annual_yield: Percent
    yearly: list[FdYearSchema]


# ---------------------------------------------------------------------------
# NPS / Retirement
# ---------------------------------------------------------------------------

class NpsRequest(BaseModel):
    current_age: int = Field(default=30, ge=18, le=70)
    retirement_age: int = Field(default=60, ge=19, le=75)
    monthly_contribution: float = Field(default=5000, gt=0)
    expected_return: float = Field(default=10, ge=0, le=30)
    annuity_percent: float = Field(default=40, ge=40, le=100)
    annuity_rate: float = Field(default=6, ge=0, le=20)


class NpsYearSchema(ResultSchema):
    age: int
    invested_amount: Money
    corpus_value: Money


class NpsResponse(ResultSchema):
    total_invested: Money
    total_corpus: Money
    interest_earned: Money
    lump_sum: Money
    annuity_corpus: Money
    monthly_pension: Money
    yearly: list[NpsYearSchema]


class RetirementRequest(BaseModel):
    current_age: int = Field(default=30, ge=18, le=80)
    retirement_age: int = Field(default=60, ge=19, le=85)
    life_expectancy: int = Field(default=85, ge=20, le=110)
    monthly_expenses: float = Field(default=50000, gt=0)
    inflation_rate: float = Field(default=6, ge=0, le=20)
    pre_retirement_return: float = Field(default=12, ge=0, le=30)
    post_retirement_return: float = Field(default=8, ge=0, le=30)
    existing_savings: float = Field(default=0, ge=0)
    monthly_investment: float = Field(default=0, ge=0)


class RetirementYearSchema(ResultSchema):
    age: int
    phase: str
    opening_balance: Money
    contribution: Money
    withdrawal: Money
    growth: Money
    closing_balance: Money


class RetirementResponse(ResultSchema):
    years_to_retirement: int
    retirement_years: int
    monthly_expenses_at_retirement: Money
    required_corpus: Money
    projected_corpus: Money
    shortfall: Money
    additional_monthly_investment: Money
    projection: list[RetirementYearSchema]
