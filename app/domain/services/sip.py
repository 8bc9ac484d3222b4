# app/domain/services/sip.py
"""
Systematic Investment Plan and lumpsum growth projections.

SIP instalments are invested at the start of each month (annuity-due):

    FV = M * ((1 + i)^n - 1) / i * (1 + i),   i = r / 12 / 100,  n = 12 * years
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class GrowthYear:
    year: int
    invested_amount: float
    estimated_value: float
    estimated_returns: float


@dataclass
class SipResult:
    total_invested: float
    estimated_returns: float
    maturity_value: float
    yearly: list[GrowthYear] = field(default_factory=list)


@dataclass
class LumpsumResult:
    invested_amount: float
    estimated_returns: float
    maturity_value: float
    yearly: list[GrowthYear] = field(default_factory=list)


def sip_future_value(monthly_investment: float, annual_rate: float, months: int) -> float:
    """Future value of *months* start-of-month instalments."""
    i = annual_rate / 12 / 100
    if i == 0:
        return monthly_investment * months
    return monthly_investment * ((1 + i) ** months - 1) / i * (1 + i)


def calculate_sip(
    monthly_investment: float,
    annual_rate: float,
    years: int,
    annual_step_up: float = 0.0,
) -> SipResult:
    """Project a monthly SIP, optionally stepping the instalment up every year."""
    if monthly_investment <= 0 or annual_rate < 0 or years <= 0 or annual_step_up < 0:
        raise ValueError("investment and tenure must be positive; rate and step-up non-negative")

    yearly: list[GrowthYear] = []

    if not annual_step_up:
        for year in range(1, years + 1):
            value = sip_future_value(monthly_investment, annual_rate, year * 12)
            invested = monthly_investment * 12 * year
            yearly.append(GrowthYear(year, invested, value, value - invested))
    else:
        i = annual_rate / 12 / 100
        value = invested = 0.0
        instalment = monthly_investment
        for year in range(1, years + 1):
            for _ in range(12):
                value = (value + instalment) * (1 + i)
                invested += instalment
            yearly.append(GrowthYear(year, invested, value, value - invested))
            instalment *= 1 + annual_step_up / 100

    last = yearly[-1]
    return SipResult(
        total_invested=last.invested_amount,
        estimated_returns=last.estimated_returns,
        maturity_value=last.estimated_value,
        yearly=yearly,
    )


def calculate_lumpsum(amount: float, annual_rate: float, years: int) -> LumpsumResult:
    """FV = A * (1 + r/100)^t, compounded annually."""
    if amount <= 0 or annual_rate < 0 or years <= 0:
        raise ValueError("amount and tenure must be positive; rate non-negative")

    yearly = []
    for year in range(1, years + 1):
        value = amount * (1 + annual_rate / 100) ** year
        yearly.append(GrowthYear(year, amount, value, value - amount))

    maturity = yearly[-1].estimated_value
    return LumpsumResult(
        invested_amount=amount,
        estimated_returns=maturity - amount,
        maturity_value=maturity,
        yearly=yearly,
    )
