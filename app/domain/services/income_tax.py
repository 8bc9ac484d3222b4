# app/domain/services/income_tax.py
"""
Income-tax computation for resident individuals.

Supports both regimes for every assessment year in tax_rate_defaults:
- Old regime: age-based slabs, Chapter VI-A deductions, 87A rebate up to 5L
- New regime (115BAC): flat slabs, standard deduction only, 87A rebate with
  marginal relief, surcharge capped at 25%
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from app.domain.models.tax_rate_config import ITRSlabConfig
from app.domain.services.tax_rate_defaults import default_itr_slabs

logger = logging.getLogger("income_tax")

ZERO = Decimal("0")
REGIMES = ("old", "new")


# ---------------------------------------------------------------------------
# Data models
# ---------------------------------------------------------------------------

@dataclass
class IncomeTaxInput:
    """Annual income, deductions and prepaid taxes of one taxpayer."""
    assessment_year: str = "2025-26"
    age: int = 0                                     # Age on 31 March of the FY

    # Income heads
    salary_income: Decimal = ZERO                    # Gross salary before standard deduction
    house_property_income: Decimal = ZERO            # Net annual value; can be negative
    capital_gains: Decimal = ZERO                    # Taxed at slab rates here
    business_income: Decimal = ZERO
    interest_income: Decimal = ZERO
    other_income: Decimal = ZERO                     # Dividends and other sources

    # Deductions (Chapter VI-A), old regime only
    section_80c: Decimal = ZERO       # PPF, ELSS, LIC, 80CCC, 80CCD(1) (max 1.5L)
    section_80d: Decimal = ZERO       # Medical insurance (max 25K / 50K senior)
    section_80ccd_1b: Decimal = ZERO  # NPS additional (max 50K)
    section_80tta: Decimal = ZERO     # Savings interest: 80TTA 10K, 80TTB 50K for seniors
    section_80e: Decimal = ZERO       # Education loan interest (no limit)
    section_80g: Decimal = ZERO       # Donations
    other_deductions: Decimal = ZERO

    # Tax already paid
    tds: Decimal = ZERO
    advance_tax: Decimal = ZERO
    self_assessment_tax: Decimal = ZERO

    @property
    def gross_total_income(self) -> Decimal:
        return (
            self.salary_income
            + self.house_property_income
            + self.capital_gains
            + self.business_income
            + self.interest_income
            + self.other_income
        )

    @property
    def taxes_paid(self) -> Decimal:
        return self.tds + self.advance_tax + self.self_assessment_tax


@dataclass
class TaxBreakdown:
    """Tax computation result for a single regime."""
    regime: str  # "old" or "new"
    assessment_year: str = ""
    gross_total_income: Decimal = ZERO
    standard_deduction: Decimal = ZERO
    total_deductions: Decimal = ZERO         # Chapter VI-A after caps
    taxable_income: Decimal = ZERO
    tax_on_income: Decimal = ZERO
    rebate_87a: Decimal = ZERO
    tax_after_rebate: Decimal = ZERO
    surcharge: Decimal = ZERO
    health_cess: Decimal = ZERO              # 4% health & education cess
    total_tax_liability: Decimal = ZERO
    taxes_paid: Decimal = ZERO
    tax_payable: Decimal = ZERO
    refund_due: Decimal = ZERO
    slab_details: list[dict] = field(default_factory=list)
    deduction_details: dict[str, Decimal] = field(default_factory=dict)

    @property
    def effective_rate(self) -> Decimal:
        """Total liability as a percentage of gross total income."""
        if self.gross_total_income <= 0:
            return ZERO
        return self.total_tax_liability * 100 / self.gross_total_income


@dataclass
class RegimeComparison:
    """Old vs new regime for the same inputs."""
    old_regime: TaxBreakdown
    new_regime: TaxBreakdown
    recommended_regime: str = "new"
    savings: Decimal = ZERO  # How much the recommended regime saves


# ---------------------------------------------------------------------------
# Age helpers
# ---------------------------------------------------------------------------

def age_from_dob(dob_str: str, assessment_year: str = "2025-26") -> int:
    """Calculate age as on March 31 of the *financial year* (AY minus 1).

    Accepts DD/MM/YYYY, DD-MM-YYYY or ISO YYYY-MM-DD. Returns 0 if parsing fails.
    """
    try:
        parts = dob_str.strip().replace("-", "/").split("/")
        if len(parts) != 3:
            return 0
        if len(parts[0]) == 4:
            year, month, day = int(parts[0]), int(parts[1]), int(parts[2][:2])
        else:
            day, month, year = int(parts[0]), int(parts[1]), int(parts[2])
        dob = date(year, month, day)
    except (ValueError, IndexError):
        return 0

    # Financial year end: AY "2025-26" -> FY end = 2025-03-31
    try:
        ay_start = int(assessment_year.split("-")[0])
    except (ValueError, IndexError):
        ay_start = 2025
    fy_end = date(ay_start, 3, 31)

    age = fy_end.year - dob.year - ((fy_end.month, fy_end.day) < (dob.month, dob.day))
    return max(age, 0)


# ---------------------------------------------------------------------------
# Core computation functions
# ---------------------------------------------------------------------------

def compute_slab_tax(taxable_income: Decimal, slabs: list[tuple]) -> tuple[Decimal, list[dict]]:
    """
    Compute tax using slab rates. Returns (tax_amount, slab_details).
    """
    tax = ZERO
    details = []
    prev_limit = ZERO

    for upper_limit, rate in slabs:
        if taxable_income <= prev_limit:
            break
        if upper_limit is None:
            slab_income = taxable_income - prev_limit
            label = f"{int(prev_limit):,}+"
        else:
            slab_income = min(taxable_income, upper_limit) - prev_limit
            label = f"{int(prev_limit):,} - {int(upper_limit):,}"
        slab_tax = slab_income * rate / 100
        tax += slab_tax
        details.append({
            "range": label,
            "rate": f"{rate}%",
            "income": float(slab_income),
            "tax": float(slab_tax),
        })
        if upper_limit is None:
            break
        prev_limit = upper_limit

    return tax, details


def marginal_rate(taxable_income: Decimal, slabs: list[tuple]) -> Decimal:
    """Slab rate applying to the last rupee of *taxable_income*."""
    prev_limit = ZERO
    rate = ZERO
    for upper_limit, slab_rate in slabs:
        if taxable_income <= prev_limit:
            break
        rate = slab_rate
        if upper_limit is None:
            break
        prev_limit = upper_limit
    return rate


def surcharge_rate(income: Decimal, surcharge_slabs: list[tuple]) -> tuple[Decimal, Decimal]:
    """Return (rate, lower_threshold) of the surcharge slab containing *income*."""
    for lower, upper, rate in surcharge_slabs:
        if income > lower and (upper is None or income <= upper):
            return rate, lower
    return ZERO, ZERO


def compute_surcharge(
    tax: Decimal,
    taxable_income: Decimal,
    slabs: list[tuple],
    surcharge_slabs: list[tuple],
) -> Decimal:
    """
    Compute surcharge with marginal relief.

    Tax plus surcharge on income just above a threshold may not exceed the
    tax plus surcharge payable at the threshold by more than the income in
    excess of the threshold.
    """
    rate, lower = surcharge_rate(taxable_income, surcharge_slabs)
    if rate == 0:
        return ZERO

    surcharge = tax * rate / 100

    tax_at_lower, _ = compute_slab_tax(lower, slabs)
    prev_rate, _ = surcharge_rate(lower, surcharge_slabs)
    ceiling = tax_at_lower * (1 + prev_rate / 100) + (taxable_income - lower)
    relief_cap = max(ceiling - tax, ZERO)

    return min(surcharge, relief_cap)


def chapter_via_deductions(inp: IncomeTaxInput, config: ITRSlabConfig) -> dict[str, Decimal]:
    """Old-regime Chapter VI-A deductions with statutory caps applied."""
    senior = inp.age >= 60
    d80d_max = config.section_80d_max_senior if senior else config.section_80d_max_self
    savings_interest_max = config.section_80ttb_max if senior else config.section_80tta_max
    return {
        "80C": min(inp.section_80c, config.section_80c_max),
        "80D": min(inp.section_80d, d80d_max),
        "80CCD(1B)": min(inp.section_80ccd_1b, config.section_80ccd_1b_max),
        "80TTB" if senior else "80TTA": min(inp.section_80tta, savings_interest_max),
        "80E": inp.section_80e,
        "80G": inp.section_80g,
        "Other": inp.other_deductions,
    }


def compute_income_tax(
    inp: IncomeTaxInput,
    regime: str = "new",
    config: ITRSlabConfig | None = None,
) -> TaxBreakdown:
    """Compute tax liability for one regime.

    Args:
        regime: "old" or "new".
        config: Optional slab config; defaults to the one for ``inp.assessment_year``.

    Raises:
        ValueError: on an unknown regime or unsupported assessment year.
    """
    if regime not in REGIMES:
        raise ValueError(f"regime must be 'old' or 'new', got {regime!r}")
    config = config or default_itr_slabs(inp.assessment_year)

    gross_total = inp.gross_total_income

    std_cap = config.standard_deduction_new_regime if regime == "new" else config.standard_deduction_old_regime
    standard_deduction = min(std_cap, inp.salary_income) if inp.salary_income > 0 else ZERO

    if regime == "old":
        deduction_details = chapter_via_deductions(inp, config)
    else:
        deduction_details = {}
    deductions = sum(deduction_details.values(), ZERO)

    taxable_income = max(gross_total - standard_deduction - deductions, ZERO)
    slabs = config.slabs_for(regime, inp.age)
    tax_on_income, slab_details = compute_slab_tax(taxable_income, slabs)

    # Rebate u/s 87A
    if regime == "old":
        rebate_limit, rebate_max = config.rebate_87a_old_limit, config.rebate_87a_old_max
    else:
        rebate_limit, rebate_max = config.rebate_87a_new_limit, config.rebate_87a_new_max

    rebate = ZERO
    if taxable_income <= rebate_limit:
        rebate = min(tax_on_income, rebate_max)
    elif regime == "new" and config.new_regime_marginal_relief:
        # Marginal relief: tax cannot exceed the income above the rebate limit
        excess = taxable_income - rebate_limit
        if tax_on_income > excess:
            rebate = tax_on_income - excess

    tax_after_rebate = max(tax_on_income - rebate, ZERO)

    surcharge_slabs = config.surcharge_slabs_new if regime == "new" else config.surcharge_slabs_old
    surcharge = compute_surcharge(tax_after_rebate, taxable_income, slabs, surcharge_slabs)

    # Health & Education Cess
    cess = (tax_after_rebate + surcharge) * config.cess_rate / 100

    total_liability = tax_after_rebate + surcharge + cess
    taxes_paid = inp.taxes_paid

    logger.debug(
        "AY %s %s regime: taxable=%s liability=%s",
        config.assessment_year, regime, taxable_income, total_liability,
    )

    return TaxBreakdown(
        regime=regime,
        assessment_year=config.assessment_year,
        gross_total_income=gross_total,
        standard_deduction=standard_deduction,
        total_deductions=deductions,
        taxable_income=taxable_income,
        tax_on_income=tax_on_income,
        rebate_87a=rebate,
        tax_after_rebate=tax_after_rebate,
        surcharge=surcharge,
        health_cess=cess,
        total_tax_liability=total_liability,
        taxes_paid=taxes_paid,
        tax_payable=max(total_liability - taxes_paid, ZERO),
        refund_due=max(taxes_paid - total_liability, ZERO),
        slab_details=slab_details,
        deduction_details=deduction_details,
    )


def compare_regimes(inp: IncomeTaxInput, config: ITRSlabConfig | None = None) -> RegimeComparison:
    """Compute both regimes and recommend the cheaper one (ties go to new)."""
    config = config or default_itr_slabs(inp.assessment_year)
    old = compute_income_tax(inp, "old", config)
    new = compute_income_tax(inp, "new", config)

    if new.total_tax_liability <= old.total_tax_liability:
        recommended = "new"
        savings = old.total_tax_liability - new.total_tax_liability
    else:
        recommended = "old"
        savings = new.total_tax_liability - old.total_tax_liability

    return RegimeComparison(
        old_regime=old,
        new_regime=new,
        recommended_regime=recommended,
        savings=savings,
    )
