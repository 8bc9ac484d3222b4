# app/domain/services/gratuity.py
"""
Gratuity payable on leaving an employer and its tax exemption u/s 10(10).

- Employees covered by the Payment of Gratuity Act, 1972:
  15 days' salary (basic + DA, month = 26 days) per year of service,
  a final part-year of 6 months or more counts as a full year,
  capped at Rs 20,00,000.
- Employees not covered: 15 days of the 10-month average salary
  (month = 30 days) per completed year, no cap on the payable amount.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

logger = logging.getLogger("gratuity")

GRATUITY_CAP = Decimal("2000000")
MIN_SERVICE_YEARS = 5


@dataclass
class GratuityResult:
    employee_type: str
    salary: Decimal
    effective_years: int
    formula_amount: Decimal
    gratuity_payable: Decimal
    tax_exempt: Decimal
    taxable: Decimal
    minimum_service_met: bool
    breakdown: list[str] = field(default_factory=list)


def effective_service_years(years: int, months: int, covered: bool = True) -> int:
    """Years counted for gratuity; covered employees round up a part-year of 6+ months."""
    if covered and months >= 6:
        return years + 1
    return years


def calculate_gratuity(
    employee_type: str,
    service_years: int,
    service_months: int = 0,
    last_drawn_basic: Decimal = Decimal("0"),
    last_drawn_da: Decimal = Decimal("0"),
    average_salary: Decimal = Decimal("0"),
    actual_received: Decimal | None = None,
) -> GratuityResult:
    """Compute gratuity for a ``"covered"`` or ``"not_covered"`` employee."""
    if employee_type not in ("covered", "not_covered"):
        raise ValueError("employee_type must be 'covered' or 'not_covered'")
    if service_years < 0 or not 0 <= service_months <= 11:
        raise ValueError("service must be non-negative years and 0-11 months")

    covered = employee_type == "covered"

    if service_years == 0 and service_months == 0:
        zero = Decimal("0")
        return GratuityResult(employee_type, zero, 0, zero, zero, zero, zero, False, ["No qualifying service"])

    years = effective_service_years(service_years, service_months, covered)

    if covered:
        salary = last_drawn_basic + last_drawn_da
        formula = salary * 15 / 26 * years
        payable = min(formula, GRATUITY_CAP)
        breakdown = [
            f"Last drawn salary (basic + DA): Rs {salary:,.2f}",
            f"Service counted: {years} years ({service_years} years {service_months} months)",
            f"Formula: {salary:,.2f} x 15/26 x {years} = Rs {formula:,.2f}",
        ]
    else:
        salary = average_salary
        formula = salary * 15 / 30 * years
        payable = formula
        breakdown = [
            f"Average salary of last 10 months: Rs {salary:,.2f}",
            f"Completed years of service: {years}",
            f"Formula: {salary:,.2f} x 15/30 x {years} = Rs {formula:,.2f}",
        ]

    if payable < formula:
        breakdown.append(f"Capped at statutory limit of Rs {GRATUITY_CAP:,.0f}")

    considered = actual_received if actual_received and actual_received > 0 else payable
    exempt = min(GRATUITY_CAP, considered, formula)
    taxable = max(considered - exempt, Decimal("0"))
    breakdown.append(f"Tax exempt u/s 10(10): Rs {exempt:,.2f}; taxable: Rs {taxable:,.2f}")

    minimum_met = service_years >= MIN_SERVICE_YEARS
    if not minimum_met:
        breakdown.append(f"Less than {MIN_SERVICE_YEARS} years of continuous service")

    return GratuityResult(
        employee_type=employee_type,
        salary=salary,
        effective_years=years,
        formula_amount=formula,
        gratuity_payable=payable,
        tax_exempt=exempt,
        taxable=taxable,
        minimum_service_met=minimum_met,
        breakdown=breakdown,
    )
