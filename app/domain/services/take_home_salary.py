# app/domain/services/take_home_salary.py
"""
Annual take-home pay from a gross salary.

The gross is split into basic, HRA, LTA and special allowance. Employee EPF
and professional tax come out of pay in both regimes. Under the old regime
the HRA exemption reduces taxable salary, professional tax is deductible
u/s 16(iii) and employee EPF counts towards the 80C cap. Income tax is
computed by the income-tax engine for the chosen regime and year.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from app.domain.services.hra import calculate_hra_exemption
from app.domain.services.income_tax import IncomeTaxInput, compute_income_tax

logger = logging.getLogger("take_home_salary")

ZERO = Decimal("0")

BASIC_SHARE = Decimal("0.5")        # of gross
HRA_SHARE = Decimal("0.4")          # of basic
LTA_SHARE = Decimal("0.05")         # of gross
EMPLOYEE_EPF_RATE = Decimal("0.12")  # of basic
DEFAULT_PROFESSIONAL_TAX = Decimal("2400")


@dataclass
class TakeHomeResult:
    regime: str
    assessment_year: str
    gross_salary: Decimal
    basic_salary: Decimal
    hra: Decimal
    lta: Decimal
    special_allowance: Decimal
    hra_exemption: Decimal
    employee_epf: Decimal
    professional_tax: Decimal
    taxable_income: Decimal
    income_tax: Decimal
    surcharge: Decimal
    cess: Decimal
    total_tax: Decimal
    take_home_annual: Decimal
    take_home_monthly: Decimal
    effective_tax_rate: Decimal


def calculate_take_home_salary(
    gross_salary: Decimal,
    regime: str = "new",
    assessment_year: str = "2025-26",
    age: int = 30,
    metro: bool = True,
    basic_salary: Decimal | None = None,
    hra: Decimal | None = None,
    rent_paid: Decimal = ZERO,
    employee_epf: Decimal | None = None,
    professional_tax: Decimal = DEFAULT_PROFESSIONAL_TAX,
    section_80c: Decimal = ZERO,
    section_80d: Decimal = ZERO,
    other_deductions: Decimal = ZERO,
) -> TakeHomeResult:
    """All amounts are annual. Omitted components use the usual salary-structure shares."""
    if gross_salary < 0:
        raise ValueError("gross_salary cannot be negative")

    basic = gross_salary * BASIC_SHARE if basic_salary is None else basic_salary
    hra_amount = basic * HRA_SHARE if hra is None else hra
    lta = gross_salary * LTA_SHARE
    special = gross_salary - basic - hra_amount - lta
    if special < 0:
        if basic + hra_amount > gross_salary:
            raise ValueError("basic_salary and hra cannot exceed gross_salary")
        lta, special = gross_salary - basic - hra_amount, ZERO
    epf = basic * EMPLOYEE_EPF_RATE if employee_epf is None else employee_epf

    salary_income = gross_salary
    hra_exemption = ZERO
    deductions_80c = section_80c
    if regime == "old":
        if rent_paid > 0:
            hra_exemption = calculate_hra_exemption(basic, hra_amount, rent_paid, metro, period="annual").exemption
        salary_income = max(gross_salary - hra_exemption - professional_tax, ZERO)
        deductions_80c += epf

    tax = compute_income_tax(
        IncomeTaxInput(
            assessment_year=assessment_year,
            age=age,
            salary_income=salary_income,
            section_80c=deductions_80c,
            section_80d=section_80d,
            other_deductions=other_deductions,
        ),
        regime,
    )

    take_home = gross_salary - tax.total_tax_liability - epf - professional_tax
    effective = tax.total_tax_liability * 100 / gross_salary if gross_salary > 0 else ZERO
    logger.debug("Take-home under %s regime: %s", regime, take_home)

    return TakeHomeResult(
        regime=regime,
        assessment_year=tax.assessment_year,
        gross_salary=gross_salary,
        basic_salary=basic,
        hra=hra_amount,
        lta=lta,
        special_allowance=special,
        hra_exemption=hra_exemption,
        employee_epf=epf,
        professional_tax=professional_tax,
        taxable_income=tax.taxable_income,
        income_tax=tax.tax_after_rebate,
        surcharge=tax.surcharge,
        cess=tax.health_cess,
        total_tax=tax.total_tax_liability,
        take_home_annual=take_home,
        take_home_monthly=take_home / 12,
        effective_tax_rate=effective,
    )
