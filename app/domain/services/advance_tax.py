# app/domain/services/advance_tax.py
"""
Advance tax instalment schedule (Sections 208, 211).

Liability comes from the income-tax engine; what remains after TDS and
advance tax already paid is spread over the statutory due dates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from app.domain.services.income_tax import IncomeTaxInput, TaxBreakdown, compute_income_tax

logger = logging.getLogger("advance_tax")

ADVANCE_TAX_THRESHOLD = Decimal("10000")  # Sec 208: liable when net tax >= 10,000

# (month, day, cumulative percent due) within the financial year
INSTALMENTS = [
    (6, 15, Decimal("15")),
    (9, 15, Decimal("45")),
    (12, 15, Decimal("75")),
    (3, 15, Decimal("100")),
]
PRESUMPTIVE_INSTALMENTS = [(3, 15, Decimal("100"))]


@dataclass
class AdvanceTaxInstalment:
    due_date: date
    cumulative_percent: Decimal
    cumulative_amount: Decimal
    amount: Decimal


@dataclass
class AdvanceTaxResult:
    assessment_year: str
    regime: str
    tax: TaxBreakdown
    total_tax_liability: Decimal
    tds: Decimal
    advance_tax_paid: Decimal
    net_advance_tax: Decimal
    advance_tax_required: bool
    instalments: list[AdvanceTaxInstalment] = field(default_factory=list)


def _rupees(amount: Decimal) -> Decimal:
    return amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def due_date_for(assessment_year: str, month: int, day: int) -> date:
    """Map an instalment month/day onto the financial year preceding *assessment_year*."""
    fy_start = int(assessment_year.split("-")[0]) - 1
    return date(fy_start if month >= 4 else fy_start + 1, month, day)


def calculate_advance_tax(
    estimated_taxable_income: Decimal,
    regime: str = "new",
    assessment_year: str = "2025-26",
    age: int = 0,
    tds: Decimal = Decimal("0"),
    advance_tax_paid: Decimal = Decimal("0"),
    presumptive: bool = False,
) -> AdvanceTaxResult:
    """Compute advance tax due by each instalment date.

    The estimate is treated as income already net of deductions, so no
    standard deduction or Chapter VI-A deduction is applied again.
    """
    if estimated_taxable_income < 0:
        raise ValueError("estimated_taxable_income cannot be negative")

    inp = IncomeTaxInput(assessment_year=assessment_year, age=age, other_income=estimated_taxable_income)
    tax = compute_income_tax(inp, regime)

    liability = tax.total_tax_liability
    net = max(liability - tds - advance_tax_paid, Decimal("0"))

    schedule = PRESUMPTIVE_INSTALMENTS if presumptive else INSTALMENTS
    instalments: list[AdvanceTaxInstalment] = []
    previous = Decimal("0")
    for month, day, pct in schedule:
        cumulative = _rupees(net * pct / 100)
        instalments.append(AdvanceTaxInstalment(
            due_date=due_date_for(assessment_year, month, day),
            cumulative_percent=pct,
            cumulative_amount=cumulative,
            amount=cumulative - previous,
        ))
        previous = cumulative

    logger.info("Advance tax AY %s (%s regime): net %s over %d instalments",
                assessment_year, regime, net, len(instalments))

    return AdvanceTaxResult(
        assessment_year=assessment_year,
        regime=regime,
        tax=tax,
        total_tax_liability=liability,
        tds=tds,
        advance_tax_paid=advance_tax_paid,
        net_advance_tax=net,
        advance_tax_required=net >= ADVANCE_TAX_THRESHOLD,
        instalments=instalments,
    )
