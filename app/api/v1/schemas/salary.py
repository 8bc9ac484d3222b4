# app/api/v1/schemas/salary.py
"""Request and response schemas for salary calculators: gratuity, HRA, TDS, EPF and take-home pay."""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field

from app.api.v1.schemas.common import Amount, Money, ResultSchema


class GratuityRequest(BaseModel):
    employee_type: Literal["covered", "not_covered"] = Field(
        default="covered", description="Covered by the Payment of Gratuity Act, 1972",
    )
    service_years: int = Field(default=10, ge=0, le=60)
    service_months: int = Field(default=0, ge=0, le=11)
    last_drawn_basic: Decimal = Field(default=Decimal("50000"), ge=0, description="Monthly basic salary")
    last_drawn_da: Decimal = Field(default=Decimal("0"), ge=0, description="Monthly dearness allowance")
    average_salary: Decimal = Field(default=Decimal("0"), ge=0, description="10-month average, not-covered employees")
    actual_received: Decimal | None = Field(default=None, ge=0)


class GratuityResponse(ResultSchema):
    employee_type: str
    salary: Amount
    effective_years: int
    formula_amount: Amount
    gratuity_payable: Amount
    tax_exempt: Amount
    taxable: Amount
    minimum_service_met: bool
    breakdown: list[str]


class HraRequest(BaseModel):
    basic_salary: Decimal = Field(default=Decimal("50000"), ge=0)
    dearness_allowance: Decimal = Field(default=Decimal("0"), ge=0)
    hra_received: Decimal = Field(default=Decimal("20000"), ge=0)
    rent_paid: Decimal = Field(default=Decimal("15000"), ge=0)
    metro: bool = Field(default=True, description="Delhi, Mumbai, Kolkata or Chennai")
    period: Literal["monthly", "annual"] = "monthly"


class HraResponse(ResultSchema):
    salary: Amount
    actual_hra: Amount
    rent_minus_10pct_salary: Amount
    percent_of_salary: Amount
    exemption: Amount
    taxable_hra: Amount


class TdsRequest(BaseModel):
    payment_type: Literal[
        "salary", "contractor", "professional_fees", "interest", "rent", "commission", "dividend",
    ] = "professional_fees"
    amount: Decimal = Field(default=Decimal("50000"), ge=0)
    period: Literal["monthly", "annual"] = "annual"
    pan_available: bool = True
    payee_type: Literal["individual", "company"] = "individual"
    senior_citizen: bool = Field(default=False, description="Raises the Sec 194A interest threshold")
    assessment_year: str | None = Field(default=None, description="Used for salary TDS; defaults to the configured AY")


class TdsResponse(ResultSchema):
    payment_type: str
    section: str
    amount: Amount
    annual_amount: Amount
    rate: Amount
    tds_amount: Amount
    net_amount: Amount
    below_threshold: bool
    higher_rate_applied: bool


class EpfRequest(BaseModel):
    basic_salary: float = Field(default=30000, ge=0, description="Monthly basic + DA")
    employee_rate: float = Field(default=12, ge=0, le=100)
    employer_rate: float = Field(default=12, ge=0, le=100)
    eps_enabled: bool = Field(default=True, description="Employer share partly diverted to EPS")
    annual_rate: float = Field(default=8.15, ge=0, le=20)
    current_balance: float = Field(default=0, ge=0)
    current_age: int = Field(default=30, ge=15, le=70)
    retirement_age: int = Field(default=60, ge=16, le=75)
    salary_increment: float = Field(default=5, ge=0, le=50, description="Yearly increase in basic (%)")
    years_of_service: int | None = Field(default=None, ge=1, le=60)


class EpfYearSchema(ResultSchema):
    year: int
    opening_balance: Money
    employee_contribution: Money
    employer_contribution: Money
    eps_contribution: Money
    interest: Money
    closing_balance: Money


class EpfResponse(ResultSchema):
    years: int
    employee_monthly: Money
    employer_monthly: Money
    eps_monthly: Money
    employer_epf_monthly: Money
    total_monthly: Money
    maturity_amount: Money
    total_contribution: Money
    total_employee_contribution: Money
    total_employer_contribution: Money
    total_eps_contribution: Money
    total_interest: Money
    yearly: list[EpfYearSchema]


class TakeHomeRequest(BaseModel):
    gross_salary: Decimal = Field(default=Decimal("1000000"), ge=0, description="Annual gross salary")
    regime: Literal["old", "new"] = "new"
    assessment_year: str | None = None
    age: int = Field(default=30, ge=0, le=120)
    metro: bool = True
    basic_salary: Decimal | None = Field(default=None, ge=0, description="Annual; defaults to 50% of gross")
    hra: Decimal | None = Field(default=None, ge=0, description="Annual; defaults to 40% of basic")
    rent_paid: Decimal = Field(default=Decimal("0"), ge=0, description="Annual rent")
    employee_epf: Decimal | None = Field(default=None, ge=0, description="Annual; defaults to 12% of basic")
    professional_tax: Decimal = Field(default=Decimal("2400"), ge=0)
    section_80c: Decimal = Field(default=Decimal("0"), ge=0, description="Besides employee EPF")
    section_80d: Decimal = Field(default=Decimal("0"), ge=0)
    other_deductions: Decimal = Field(default=Decimal("0"), ge=0)


class TakeHomeResponse(ResultSchema):
    regime: str
    assessment_year: str
    gross_salary: Amount
    basic_salary: Amount
    hra: Amount
    lta: Amount
    special_allowance: Amount
    hra_exemption: Amount
    employee_epf: Amount
    professional_tax: Amount
    taxable_income: Amount
    income_tax: Amount
    surcharge: Amount
    cess: Amount
    total_tax: Amount
    take_home_annual: Amount
    take_home_monthly: Amount
    effective_tax_rate: Amount
