# app/domain/services/deposits.py
"""
Bank deposit maturity: Recurring Deposits (RD) and Fixed Deposits (FD).

Both follow the usual Indian bank conventions: RDs compound quarterly on
each monthly instalment, FDs compound at the chosen frequency or earn simple
interest. Senior citizens get an extra 0.5% p.a.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger("deposits")

SENIOR_CITIZEN_BONUS = 0.5

FD_COMPOUNDING = {
    "monthly": 12,
    "quarterly": 4,
    "half-yearly": 2,
    "yearly": 1,
}

FD_TDS_RATE = 10.0
FD_TDS_THRESHOLD = 40000.0
FD_TDS_THRESHOLD_SENIOR = 50000.0


# ---------------------------------------------------------------------------
# Recurring deposit
# ---------------------------------------------------------------------------

@dataclass
class RdQuarter:
    quarter: int
    from_month: int
    to_month: int
    deposit: float
    total_deposit: float
    value: float


@dataclass
class RdResult:
    interest_rate: float
    total_deposit: float
    maturity_amount: float
    interest_earned: float
    effective_yield: float
    quarterly: list[RdQuarter] = field(default_factory=list)


def _rd_value(monthly_deposit: float, annual_rate: float, months_elapsed: int) -> float:
    """Value after *months_elapsed* months of the instalments paid so far."""
    q = 1 + annual_rate / 400
    return sum(
        monthly_deposit * q ** ((months_elapsed - j + 1) / 3)
        for j in range(1, months_elapsed + 1)
    )


def calculate_rd(
    monthly_deposit: float,
    annual_rate: float,
    tenure_months: int,
    senior_citizen: bool = False,
) -> RdResult:
    if monthly_deposit <= 0 or annual_rate <= 0 or tenure_months <= 0:
        raise ValueError("deposit, rate and tenure must be positive")

    rate = annual_rate + (SENIOR_CITIZEN_BONUS if senior_citizen else 0.0)
    total_deposit = monthly_deposit * tenure_months
    maturity = _rd_value(monthly_deposit, rate, tenure_months)

    quarterly = []
    for quarter, start in enumerate(range(1, tenure_months + 1, 3), start=1):
        end = min(start + 2, tenure_months)
        quarterly.append(RdQuarter(
            quarter=quarter,
            from_month=start,
            to_month=end,
            deposit=monthly_deposit * (end - start + 1),
            total_deposit=monthly_deposit * end,
            value=_rd_value(monthly_deposit, rate, end),
        ))

    # Average holding period of the instalments is half the tenure
    avg_years = tenure_months / 2 / 12
    effective_yield = ((maturity / total_deposit) ** (1 / avg_years) - 1) * 100

    return RdResult(
        interest_rate=rate,
        total_deposit=total_deposit,
        maturity_amount=maturity,
        interest_earned=maturity - total_deposit,
        effective_yield=effective_yield,
        quarterly=quarterly,
    )


# ---------------------------------------------------------------------------
# Fixed deposit
# ---------------------------------------------------------------------------

@dataclass
class FdYear:
    year: int
    months: int
    opening_balance: float
    interest: float
    closing_balance: float


@dataclass
class FdResult:
    interest_rate: float
    principal: float
    maturity_amount: float
    interest_earned: float
    tds_applicable: bool
    tds_amount: float
    maturity_after_tds: float
    effective_annual_yield: float
    yearly: list[FdYear] = field(default_factory=list)


def fd_value(principal: float, annual_rate: float, years: float, compounding: str) -> float:
    r = annual_rate / 100
    if compounding == "simple":
        return principal * (1 + r * years)
    n = FD_COMPOUNDING[compounding]
    return principal * (1 + r / n) ** (n * years)


def calculate_fd(
    principal: float,
    annual_rate: float,
    tenure_years: int = 0,
    tenure_months: int = 0,
    compounding: str = "quarterly",
    senior_citizen: bool = False,
    apply_tds: bool = False,
) -> FdResult:
    if principal <= 0 or annual_rate < 0:
        raise ValueError("principal must be positive and rate non-negative")
    if compounding != "simple" and compounding not in FD_COMPOUNDING:
        raise ValueError(f"Unsupported compounding {compounding!r}")
    months = tenure_years * 12 + tenure_months
    if months <= 0:
        raise ValueError("tenure must be at least one month")

    rate = annual_rate + (SENIOR_CITIZEN_BONUS if senior_citizen else 0.0)
    years = months / 12
    maturity = fd_value(principal, rate, years, compounding)
    interest = maturity - principal

    # Sec 194A: TDS when interest per financial year crosses the threshold
    threshold = FD_TDS_THRESHOLD_SENIOR if senior_citizen else FD_TDS_THRESHOLD
    tds_applicable = apply_tds and interest / max(years, 1.0) > threshold
    tds = interest * FD_TDS_RATE / 100 if tds_applicable else 0.0
    after_tds = maturity - tds

    effective_yield = ((after_tds / principal) ** (1 / years) - 1) * 100

    yearly = []
    opening = principal
    full_years, remainder = divmod(months, 12)
    for year in range(1, full_years + 1):
        closing = fd_value(principal, rate, year, compounding)
        yearly.append(FdYear(year, 12, opening, closing - opening, closing))
        opening = closing
    if remainder:
        yearly.append(FdYear(full_years + 1, remainder, opening, maturity - opening, maturity))

    logger.debug("FD %.2f @ %.2f%% for %d months -> %.2f", principal, rate, months, maturity)

    return FdResult(
        interest_rate=rate,
        principal=principal,
        maturity_amount=maturity,
        interest_earned=interest,
        tds_applicable=tds_applicable,
        tds_amount=tds,
        maturity_after_tds=after_tds,
        effective_annual_yield=effective_yield,
        yearly=yearly,
    )
