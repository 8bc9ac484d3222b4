# app/domain/services/compound_interest.py
"""
Compound interest with optional periodic contributions.

The balance is simulated period by period at the compounding frequency;
contributions are credited at the start of the period in which they fall
due, before that period's interest.
"""

from __future__ import annotations

from dataclasses import dataclass, field

COMPOUNDING_PERIODS = {
    "annually": 1,
    "half-yearly": 2,
    "quarterly": 4,
    "monthly": 12,
    "daily": 365,
}

CONTRIBUTION_PERIODS = {
    "yearly": 1,
    "half-yearly": 2,
    "quarterly": 4,
    "monthly": 12,
}


@dataclass
class CompoundInterestYear:
    year: int
    balance: float
    total_interest: float
    total_contributions: float


@dataclass
class CompoundInterestResult:
    maturity_amount: float
    total_contributions: float  # principal included
    total_interest: float
    yearly: list[CompoundInterestYear] = field(default_factory=list)


def calculate_compound_interest(
    principal: float,
    annual_rate: float,
    years: int,
    compounding: str = "annually",
    additional_contribution: float = 0.0,
    contribution_frequency: str = "yearly",
) -> CompoundInterestResult:
    if principal < 0 or annual_rate < 0 or years <= 0 or additional_contribution < 0:
        raise ValueError("principal, rate and contribution must be non-negative and years positive")
    try:
        n = COMPOUNDING_PERIODS[compounding]
        c = CONTRIBUTION_PERIODS[contribution_frequency]
    except KeyError as exc:
        raise ValueError(f"Unsupported frequency {exc.args[0]!r}") from exc

    period_rate = annual_rate / 100 / n
    balance = float(principal)
    contributed = float(principal)
    interest = 0.0
    yearly: list[CompoundInterestYear] = []

    for period in range(1, years * n + 1):
        # floor(p * c / n) contributions are due by period p
        count = (period * c) // n - ((period - 1) * c) // n
        if additional_contribution and count:
            balance += additional_contribution * count
            contributed += additional_contribution * count

        earned = balance * period_rate
        balance += earned
        interest += earned

        if period % n == 0:
            yearly.append(CompoundInterestYear(
                year=period // n,
                balance=balance,
                total_interest=interest,
                total_contributions=contributed,
            ))

    return CompoundInterestResult(
        maturity_amount=balance,
        total_contributions=contributed,
        total_interest=interest,
        yearly=yearly,
    )
