# app/domain/services/epf.py
"""
Employees' Provident Fund projection.

Employee and employer each contribute a share of monthly basic salary. When
the pension scheme applies, 8.33% of basic (on a wage ceiling of Rs 15,000)
of the employer share goes to EPS and only the remainder reaches the EPF
account. Interest is credited yearly on the opening balance plus half a
year's interest on that year's contributions. Basic salary grows by the
yearly increment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger("epf")

EPF_DEFAULT_RATE = 8.15
EPF_CONTRIBUTION_RATE = 12.0
EPS_RATE = 8.33
EPS_WAGE_CEILING = 15000.0


@dataclass
class EpfYear:
    year: int
    opening_balance: float
    employee_contribution: float
    employer_contribution: float   # EPF share only
    eps_contribution: float
    interest: float
    closing_balance: float


@dataclass
class EpfResult:
    years: int
    employee_monthly: float
    employer_monthly: float
    eps_monthly: float
    employer_epf_monthly: float
    total_monthly: float           # reaches the EPF account each month
    maturity_amount: float
    total_contribution: float
    total_employee_contribution: float
    total_employer_contribution: float
    total_eps_contribution: float
    total_interest: float
    yearly: list[EpfYear] = field(default_factory=list)


def monthly_split(
    basic_salary: float,
    employee_rate: float = EPF_CONTRIBUTION_RATE,
    employer_rate: float = EPF_CONTRIBUTION_RATE,
    eps_enabled: bool = True,
) -> tuple[float, float, float, float]:
    """Return (employee, employer total, EPS, employer EPF) for one month."""
    employee = basic_salary * employee_rate / 100
    employer = basic_salary * employer_rate / 100
    eps = min(basic_salary, EPS_WAGE_CEILING) * EPS_RATE / 100 if eps_enabled else 0.0
    # EPS comes out of the employer share and never exceeds it
    eps = min(eps, employer)
    return employee, employer, eps, employer - eps


def calculate_epf(
    basic_salary: float,
    employee_rate: float = EPF_CONTRIBUTION_RATE,
    employer_rate: float = EPF_CONTRIBUTION_RATE,
    eps_enabled: bool = True,
    annual_rate: float = EPF_DEFAULT_RATE,
    current_balance: float = 0.0,
    current_age: int = 30,
    retirement_age: int = 60,
    salary_increment: float = 5.0,
    years_of_service: int | None = None,
) -> EpfResult:
    """Project the EPF balance until retirement, or for *years_of_service* if shorter."""
    if basic_salary < 0 or current_balance < 0:
        raise ValueError("basic_salary and current_balance cannot be negative")
    if min(employee_rate, employer_rate, annual_rate, salary_increment) < 0:
        raise ValueError("rates cannot be negative")
    if retirement_age <= current_age:
        raise ValueError("retirement_age must be greater than current_age")

    years = retirement_age - current_age
    if years_of_service is not None:
        years = min(years, years_of_service)
    if years < 1:
        raise ValueError("projection must cover at least one year")

    employee_m, employer_m, eps_m, employer_epf_m = monthly_split(
        basic_salary, employee_rate, employer_rate, eps_enabled,
    )

    balance = current_balance
    salary = basic_salary
    total_employee = total_employer = total_eps = total_interest = 0.0
    yearly = []
    for year in range(1, years + 1):
        employee, _, eps, employer_epf = monthly_split(salary, employee_rate, employer_rate, eps_enabled)
        employee, eps, employer_epf = employee * 12, eps * 12, employer_epf * 12
        contribution = employee + employer_epf

        opening = balance
        interest = opening * annual_rate / 100 + contribution * annual_rate / 200
        balance = opening + contribution + interest

        yearly.append(EpfYear(year, opening, employee, employer_epf, eps, interest, balance))
        total_employee += employee
        total_employer += employer_epf
        total_eps += eps
        total_interest += interest
        salary *= 1 + salary_increment / 100

    logger.debug("EPF over %s years: maturity %.2f", years, balance)

    return EpfResult(
        years=years,
        employee_monthly=employee_m,
        employer_monthly=employer_m,
        eps_monthly=eps_m,
        employer_epf_monthly=employer_epf_m,
        total_monthly=employee_m + employer_epf_m,
        maturity_amount=balance,
        total_contribution=total_employee + total_employer,
        total_employee_contribution=total_employee,
        total_employer_contribution=total_employer,
        total_eps_contribution=total_eps,
        total_interest=total_interest,
        yearly=yearly,
    )
