# app/domain/services/ppf.py
"""
Public Provident Fund maturity projection.

Deposits are credited at the start of each financial year and interest is
compounded annually. Yearly deposits must lie between Rs 500 and Rs 1.5 lakh;
out-of-band amounts are clamped. The account matures after 15 years and may
be extended in blocks of 5 years.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger("ppf")

PPF_MIN_DEPOSIT = 500.0
PPF_MAX_DEPOSIT = 150000.0
PPF_DEFAULT_RATE = 7.1
PPF_LOCK_IN_YEARS = 15
PPF_EXTENSION_BLOCK = 5
PPF_MAX_YEARS = 50


@dataclass
class PpfYear:
    year: int
    deposit: float
    interest: float
    balance: float
    total_deposited: float
    total_interest: float


@dataclass
class PpfResult:
    maturity_amount: float
    total_deposited: float
    total_interest: float
    clamped: bool
    yearly: list[PpfYear] = field(default_factory=list)


def clamp_deposit(amount: float) -> float:
    return min(max(amount, PPF_MIN_DEPOSIT), PPF_MAX_DEPOSIT)


def calculate_ppf(
    initial_deposit: float,
    yearly_deposit: float,
    annual_rate: float = PPF_DEFAULT_RATE,
    years: int = PPF_LOCK_IN_YEARS,
) -> PpfResult:
    if annual_rate < 0:
        raise ValueError("annual_rate cannot be negative")
    if (
        years < PPF_LOCK_IN_YEARS
        or years > PPF_MAX_YEARS
        or (years - PPF_LOCK_IN_YEARS) % PPF_EXTENSION_BLOCK
    ):
        raise ValueError("PPF tenure is 15 years, extendable in blocks of 5 years")

    first, later = clamp_deposit(initial_deposit), clamp_deposit(yearly_deposit)
    clamped = first != initial_deposit or later != yearly_deposit
    if clamped:
        logger.info("PPF deposits clamped to Rs %.0f / Rs %.0f", first, later)

    balance = deposited = total_interest = 0.0
    yearly = []
    for year in range(1, years + 1):
        deposit = first if year == 1 else later
        balance += deposit
        deposited += deposit
        interest = balance * annual_rate / 100
        balance += interest
        total_interest += interest
        yearly.append(PpfYear(year, deposit, interest, balance, deposited, total_interest))

    return PpfResult(
        maturity_amount=balance,
        total_deposited=deposited,
        total_interest=total_interest,
        clamped=clamped,
        yearly=yearly,
    )
