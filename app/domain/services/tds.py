# app/domain/services/tds.py
"""
Tax Deducted at Source on common payment types.

Non-salary payments use flat section rates with annual thresholds. Salary
TDS (Sec 192) is the estimated income tax on the annual salary under the
new regime, spread over the pay period.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from app.domain.services.income_tax import IncomeTaxInput, compute_income_tax

logger = logging.getLogger("tds")

# payment type -> (section, rate %, annual threshold)
TDS_RATES: dict[str, tuple[str, Decimal, Decimal]] = {
    "professional_fees": ("194J", Decimal("10"), Decimal("30000")),
    "interest": ("194A", Decimal("10"), Decimal("40000")),
    "rent": ("194I", Decimal("10"), Decimal("240000")),
    "commission": ("194H", Decimal("5"), Decimal("15000")),
    "dividend": ("194", Decimal("10"), Decimal("5000")),
}

CONTRACTOR_RATE_INDIVIDUAL = Decimal("1")
CONTRACTOR_RATE_COMPANY = Decimal("2")
CONTRACTOR_SINGLE_PAYMENT_LIMIT = Decimal("30000")
CONTRACTOR_ANNUAL_LIMIT = Decimal("100000")

SENIOR_INTEREST_THRESHOLD = Decimal("50000")

NO_PAN_MIN_RATE = Decimal("20")  # Sec 206AA

PAYMENT_TYPES = ("salary", "contractor", *TDS_RATES)


@dataclass
class TdsResult:
    payment_type: str
    section: str
    amount: Decimal
    annual_amount: Decimal
    rate: Decimal
    tds_amount: Decimal
    net_amount: Decimal
    below_threshold: bool
    higher_rate_applied: bool  # no PAN


def _salary_tds(annual: Decimal, period: str, assessment_year: str) -> Decimal:
    tax = compute_income_tax(IncomeTaxInput(assessment_year=assessment_year, salary_income=annual), "new")
    liability = tax.total_tax_liability
    return liability / 12 if period == "monthly" else liability


def calculate_tds(
    payment_type: str,
    amount: Decimal,
    period: str = "annual",
    pan_available: bool = True,
    payee_type: str = "individual",
    assessment_year: str = "2025-26",
    senior_citizen: bool = False,
) -> TdsResult:
    """Compute TDS on a payment of *amount* per *period* ("monthly" or "annual").

    Contractor payments are tested against the single-payment limit when
    *period* is monthly and against the aggregate annual limit otherwise.
    Senior citizens get the higher Sec 194A interest threshold.
    """
    if payment_type not in PAYMENT_TYPES:
        raise ValueError(f"Unknown payment type {payment_type!r}")
    if period not in ("monthly", "annual"):
        raise ValueError("period must be 'monthly' or 'annual'")
    if amount < 0:
        raise ValueError("amount cannot be negative")

    annual = amount * 12 if period == "monthly" else amount

    if payment_type == "salary":
        tds_amount = _salary_tds(annual, period, assessment_year)
        rate = tds_amount * 100 / amount if amount > 0 else Decimal("0")
        below = tds_amount == 0
        higher = False
        if not pan_available and tds_amount > 0:
            # Sec 206AA for salary: average rate, but at least 20%
            if rate < NO_PAN_MIN_RATE:
                rate = NO_PAN_MIN_RATE
                tds_amount = amount * rate / 100
                higher = True
        return TdsResult(
            payment_type=payment_type,
            section="192",
            amount=amount,
            annual_amount=annual,
            rate=rate,
            tds_amount=tds_amount,
            net_amount=amount - tds_amount,
            below_threshold=below,
            higher_rate_applied=higher,
        )

    if payment_type == "contractor":
        section = "194C"
        rate = CONTRACTOR_RATE_COMPANY if payee_type == "company" else CONTRACTOR_RATE_INDIVIDUAL
        if period == "monthly":
            below = amount <= CONTRACTOR_SINGLE_PAYMENT_LIMIT
        else:
            below = annual <= CONTRACTOR_ANNUAL_LIMIT
    else:
        section, rate, threshold = TDS_RATES[payment_type]
        if payment_type == "interest" and senior_citizen:
            threshold = SENIOR_INTEREST_THRESHOLD
        below = annual <= threshold

    higher = False
    if below:
        rate = Decimal("0")
    elif not pan_available:
        rate = max(NO_PAN_MIN_RATE, rate * 2)
        higher = True

    tds_amount = amount * rate / 100
    logger.debug("TDS %s on %s: rate %s%%", section, amount, rate)

    return TdsResult(
        payment_type=payment_type,
        section=section,
        amount=amount,
        annual_amount=annual,
        rate=rate,
        tds_amount=tds_amount,
        net_amount=amount - tds_amount,
        below_threshold=below,
        higher_rate_applied=higher,
    )
