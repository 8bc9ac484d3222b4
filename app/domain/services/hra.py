# app/domain/services/hra.py
"""HRA exemption u/s 10(13A), rule 2A."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

ZERO = Decimal("0")


@dataclass
class HraResult:
    salary: Decimal               # basic + DA, annual
    actual_hra: Decimal
    rent_minus_10pct_salary: Decimal
    percent_of_salary: Decimal
    exemption: Decimal
    taxable_hra: Decimal


def calculate_hra_exemption(
    basic_salary: Decimal,
    hra_received: Decimal,
    rent_paid: Decimal,
    metro: bool,
    dearness_allowance: Decimal = ZERO,
    period: str = "monthly",
) -> HraResult:
    """Exempt HRA is the least of actual HRA, rent over 10% of salary, and 50%/40% of salary.

    Monthly figures are annualised; all amounts in the result are annual.
    """
    if period not in ("monthly", "annual"):
        raise ValueError("period must be 'monthly' or 'annual'")
    factor = 12 if period == "monthly" else 1

    salary = (basic_salary + dearness_allowance) * factor
    actual = hra_received * factor
    rent = rent_paid * factor

    rent_excess = max(rent - salary * Decimal("0.10"), ZERO)
    pct = salary * (Decimal("0.50") if metro else Decimal("0.40"))

    exemption = max(min(actual, rent_excess, pct), ZERO)

    return HraResult(
        salary=salary,
        actual_hra=actual,
        rent_minus_10pct_salary=rent_excess,
        percent_of_salary=pct,
        exemption=exemption,
        taxable_hra=actual - exemption,
    )
