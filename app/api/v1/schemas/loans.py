# app/api/v1/schemas/loans.py
"""Request and response schemas for loan calculators."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.api.v1.schemas.common import Money, Percent, ResultSchema


class LoanRequest(BaseModel):
    principal: float = Field(default=1000000, gt=0)
    annual_rate: float = Field(default=10, ge=0, le=100, description="Percent per annum")
    tenure_years: float = Field(default=5, gt=0, le=30, description="Fractional years allowed")
    include_schedule: bool = Field(default=False, description="Include the month-by-month schedule")


class AmortizationMonthSchema(ResultSchema):
    month: int
    emi: Money
    principal: Money
    interest: Money
    balance: Money


class AmortizationYearSchema(ResultSchema):
    year: int
    months: int
    principal_paid: Money
    interest_paid: Money
    total_paid: Money
    closing_balance: Money


class LoanResponse(ResultSchema):
    loan_type: str
    principal: Money
    annual_rate: Percent
    tenure_months: int
    monthly_emi: Money
    total_amount: Money
    total_interest: Money
    additional_info: dict[str, Money]
    schedule: list[AmortizationMonthSchema]
    yearly: list[AmortizationYearSchema]


class LapRequest(BaseModel):
    property_value: float = Field(default=5000000, gt=0)
    monthly_income: float = Field(default=100000, gt=0)
    existing_emi: float = Field(default=0, ge=0)
    tenure_years: int = Field(default=15, ge=1, le=30)
    annual_rate: float = Field(default=10.5, ge=0, le=30)
    ltv_ratio: float = Field(default=0.65, gt=0, le=1, description="Loan-to-value ratio")
    foir: float = Field(default=0.50, gt=0, le=1, description="Share of income available for EMIs")


class LapResponse(ResultSchema):
    max_loan_by_property: Money
    max_permissible_emi: Money
    max_loan_by_income: Money
    eligible_loan: Money
    monthly_emi: Money
    total_interest: Money
    is_eligible: bool
