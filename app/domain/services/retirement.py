# app/domain/services/retirement.py
"""
Retirement corpus planning.

The corpus needed at retirement is the present value (at retirement) of an
inflation-growing annual expense over the retirement years, discounted at
the real post-retirement return. Savings and SIPs are projected at the
pre-retirement return.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from app.domain.services.sip import sip_future_value

logger = logging.getLogger("retirement")

MAX_WITHDRAWAL_YEARS = 30


@dataclass
class RetirementYear:
    age: int
    phase: str          # "accumulation" or "withdrawal"
    opening_balance: float
    contribution: float
    withdrawal: float
    growth: float
    closing_balance: float


@dataclass
class RetirementResult:
    years_to_retirement: int
    retirement_years: int
    monthly_expenses_at_retirement: float
    required_corpus: float
    projected_corpus: float
    shortfall: float
    additional_monthly_investment: float
    projection: list[RetirementYear] = field(default_factory=list)


def required_corpus(annual_expense: float, years: int, post_return: float, inflation: float) -> float:
    """Corpus that funds *years* of inflation-linked withdrawals (paid at the start of each year)."""
    real = (1 + post_return / 100) / (1 + inflation / 100) - 1
    if abs(real) < 1e-9:
        return annual_expense * years
    return annual_expense * (1 - (1 + real) ** -years) / real * (1 + real)


def calculate_retirement(
    current_age: int,
    retirement_age: int,
    life_expectancy: int,
    monthly_expenses: float,
    inflation_rate: float,
    pre_retirement_return: float,
    post_retirement_return: float,
    existing_savings: float = 0.0,
    monthly_investment: float = 0.0,
) -> RetirementResult:
    if not current_age < retirement_age < life_expectancy:
        raise ValueError("ages must satisfy current_age < retirement_age < life_expectancy")
    if monthly_expenses <= 0:
        raise ValueError("monthly_expenses must be positive")
    if min(inflation_rate, pre_retirement_return, post_retirement_return) < 0:
        raise ValueError("rates cannot be negative")
    if existing_savings < 0 or monthly_investment < 0:
        raise ValueError("savings and investment cannot be negative")

    years_to_retire = retirement_age - current_age
    retirement_years = life_expectancy - retirement_age

    expenses_at_retirement = monthly_expenses * (1 + inflation_rate / 100) ** years_to_retire
    annual_expense = expenses_at_retirement * 12
    needed = required_corpus(annual_expense, retirement_years, post_retirement_return, inflation_rate)

    months = years_to_retire * 12
    projected = (
        existing_savings * (1 + pre_retirement_return / 100) ** years_to_retire
        + sip_future_value(monthly_investment, pre_retirement_return, months)
    )
    shortfall = max(needed - projected, 0.0)

    i = pre_retirement_return / 12 / 100
    if shortfall == 0:
        additional = 0.0
    elif i == 0:
        additional = shortfall / months
    else:
        additional = shortfall / (((1 + i) ** months - 1) / i * (1 + i))

    projection = []
    balance = existing_savings
    for year in range(1, years_to_retire + 1):
        contribution = monthly_investment * 12
        growth = (balance + contribution) * pre_retirement_return / 100
        projection.append(RetirementYear(
            current_age + year, "accumulation", balance, contribution, 0.0, growth,
            balance + contribution + growth,
        ))
        balance += contribution + growth

    withdrawal = annual_expense
    for year in range(1, min(retirement_years, MAX_WITHDRAWAL_YEARS) + 1):
        if balance <= 0:
            break
        taken = min(withdrawal, balance)
        growth = (balance - taken) * post_retirement_return / 100
        projection.append(RetirementYear(
            retirement_age + year, "withdrawal", balance, 0.0, taken, growth,
            balance - taken + growth,
        ))
        balance = balance - taken + growth
        withdrawal *= 1 + inflation_rate / 100

    logger.debug("Retirement corpus needed %.0f, projected %.0f", needed, projected)

    return RetirementResult(
        years_to_retirement=years_to_retire,
        retirement_years=retirement_years,
        monthly_expenses_at_retirement=expenses_at_retirement,
        required_corpus=needed,
        projected_corpus=projected,
        shortfall=shortfall,
        additional_monthly_investment=additional,
        projection=projection,
    )
