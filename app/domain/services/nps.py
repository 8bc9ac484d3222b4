# app/domain/services/nps.py
"""
National Pension System corpus and pension estimate.

At retirement at least 40% of the corpus must buy an annuity; the rest may
be withdrawn as a lump sum.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.services.sip import sip_future_value

MIN_ANNUITY_PERCENT = 40.0


@dataclass
class NpsYear:
    age: int
    invested_amount: float
    corpus_value: float


@dataclass
class NpsResult:
    total_invested: float
    total_corpus: float
    interest_earned: float
    lump_sum: float
    annuity_corpus: float
    monthly_pension: float
    yearly: list[NpsYear] = field(default_factory=list)


def calculate_nps(
    current_age: int,
    retirement_age: int,
    monthly_contribution: float,
    expected_return: float,
    annuity_percent: float = MIN_ANNUITY_PERCENT,
    annuity_rate: float = 6.0,
) -> NpsResult:
    if retirement_age <= current_age:
        raise ValueError("retirement_age must be greater than current_age")
    if monthly_contribution <= 0:
        raise ValueError("monthly_contribution must be positive")
    if expected_return < 0 or annuity_rate < 0:
        raise ValueError("rates cannot be negative")
    if not MIN_ANNUITY_PERCENT <= annuity_percent <= 100:
        raise ValueError("annuity_percent must be between 40 and 100")

    yearly = []
    for n in range(1, retirement_age - current_age + 1):
        yearly.append(NpsYear(
            age=current_age + n,
            invested_amount=monthly_contribution * 12 * n,
            corpus_value=sip_future_value(monthly_contribution, expected_return, n * 12),
        ))

    corpus = yearly[-1].corpus_value
    invested = yearly[-1].invested_amount
    annuity_corpus = corpus * annuity_percent / 100

    return NpsResult(
        total_invested=invested,
        total_corpus=corpus,
        interest_earned=corpus - invested,
        lump_sum=corpus - annuity_corpus,
        annuity_corpus=annuity_corpus,
        monthly_pension=annuity_corpus * annuity_rate / 12 / 100,
        yearly=yearly,
    )
