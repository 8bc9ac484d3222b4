# app/domain/services/loan_emi.py
"""
Equated Monthly Instalment (EMI) and amortization for retail loans.

    EMI = P * i * (1 + i)^n / ((1 + i)^n - 1),   i = r / 12 / 100

Home, car, personal and education loans share the formula and differ in
product limits and one-off charges.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger("loan_emi")


@dataclass(frozen=True)
class LoanProduct:
    name: str
    max_amount: float
    max_years: float
    min_amount: float = 0.0
    # one-off charges as a percentage of the principal
    charges: dict[str, float] = field(default_factory=dict)


LOAN_PRODUCTS: dict[str, LoanProduct] = {
    "home": LoanProduct(
        "Home Loan", max_amount=50_000_000, max_years=30,
        charges={"processing_fee": 0.5, "stamp_duty": 5.0, "registration_fee": 1.0},
    ),
    "car": LoanProduct(
        "Car Loan", max_amount=2_000_000, max_years=7,
        charges={"processing_fee": 1.0, "insurance": 3.0, "road_tax": 10.0},
    ),
    "personal": LoanProduct(
        "Personal Loan", max_amount=1_000_000, max_years=5, min_amount=1000,
        charges={"processing_fee": 1.0, "prepayment_penalty": 0.0},
    ),
    "education": LoanProduct(
        "Education Loan", max_amount=5_000_000, max_years=15,
        charges={"processing_fee": 1.0},
    ),
    "generic": LoanProduct(
        "Loan", max_amount=float("inf"), max_years=30,
        charges={"processing_fee": 1.0},
    ),
}


@dataclass
class AmortizationMonth:
    month: int
    emi: float
    principal: float
    interest: float
    balance: float


@dataclass
class AmortizationYear:
    year: int
    months: int
    principal_paid: float
    interest_paid: float
    total_paid: float
    closing_balance: float


@dataclass
class LoanResult:
    loan_type: str
    principal: float
    annual_rate: float
    tenure_months: int
    monthly_emi: float
    total_amount: float
    total_interest: float
    additional_info: dict[str, float] = field(default_factory=dict)
    schedule: list[AmortizationMonth] = field(default_factory=list)
    yearly: list[AmortizationYear] = field(default_factory=list)


def calculate_emi(principal: float, annual_rate: float, tenure_months: int) -> float:
    if tenure_months <= 0:
        raise ValueError("tenure_months must be positive")
    i = annual_rate / 12 / 100
    if i == 0:
        return principal / tenure_months
    factor = (1 + i) ** tenure_months
    return principal * i * factor / (factor - 1)


def amortization_schedule(
    principal: float,
    annual_rate: float,
    tenure_months: int,
) -> tuple[list[AmortizationMonth], list[AmortizationYear]]:
    """Month-by-month split of each EMI plus yearly totals."""
    emi = calculate_emi(principal, annual_rate, tenure_months)
    i = annual_rate / 12 / 100

    months: list[AmortizationMonth] = []
    balance = principal
    for month in range(1, tenure_months + 1):
        interest = balance * i
        principal_part = emi - interest
        balance = max(balance - principal_part, 0.0)
        months.append(AmortizationMonth(month, emi, principal_part, interest, balance))

    years: list[AmortizationYear] = []
    for start in range(0, tenure_months, 12):
        chunk = months[start:start + 12]
        principal_paid = sum(m.principal for m in chunk)
        interest_paid = sum(m.interest for m in chunk)
        years.append(AmortizationYear(
            year=start // 12 + 1,
            months=len(chunk),
            principal_paid=principal_paid,
            interest_paid=interest_paid,
            total_paid=principal_paid + interest_paid,
            closing_balance=chunk[-1].balance,
        ))
    return months, years


def calculate_loan(
    loan_type: str,
    principal: float,
    annual_rate: float,
    tenure_years: float,
    include_schedule: bool = False,
) -> LoanResult:
    """EMI, totals, one-off charges and yearly amortization for a loan product."""
    product = LOAN_PRODUCTS.get(loan_type)
    if product is None:
        raise ValueError(f"Unknown loan type {loan_type!r}")
    if principal <= 0 or principal < product.min_amount:
        raise ValueError(f"{product.name} amount must be at least Rs {max(product.min_amount, 1):,.0f}")
    if principal > product.max_amount:
        raise ValueError(f"{product.name} amount cannot exceed Rs {product.max_amount:,.0f}")
    if not 0 <= annual_rate <= 100:
        raise ValueError("annual_rate must be between 0 and 100")
    if tenure_years <= 0 or tenure_years > product.max_years:
        raise ValueError(f"{product.name} tenure must be up to {product.max_years:g} years")

    months = max(round(tenure_years * 12), 1)
    emi = round(calculate_emi(principal, annual_rate, months), 2)
    total = round(emi * months, 2)
    schedule, yearly = amortization_schedule(principal, annual_rate, months)

    additional = {
        charge: round(principal * pct / 100, 2)
        for charge, pct in product.charges.items()
    }

    logger.debug("%s of %.0f @ %.2f%% for %d months: EMI %.2f", product.name, principal, annual_rate, months, emi)

    return LoanResult(
        loan_type=loan_type,
        principal=principal,
        annual_rate=annual_rate,
        tenure_months=months,
        monthly_emi=emi,
        total_amount=total,
        total_interest=round(total - principal, 2),
        additional_info=additional,
        schedule=schedule if include_schedule else [],
        yearly=yearly,
    )
