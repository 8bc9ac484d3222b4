# app/domain/services/tax_form_summary.py
"""
Map a stored tax-form record (as returned by the backend ``/api/tax-forms/:id``)
onto an :class:`IncomeTaxInput` and compute its tax summary.

The backend stores each section as a JSON string. Income heads come in two
shapes: a flat amount string (``"12,00,000"``) or a list of line items whose
net amount sits under a head-specific key.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal, InvalidOperation
from typing import Any

from app.core.config import settings
from app.domain.services.income_tax import (
    IncomeTaxInput,
    TaxBreakdown,
    age_from_dob,
    compute_income_tax,
)

logger = logging.getLogger("tax_form_summary")

# income head -> key holding the net amount on each line item
_ITEM_AMOUNT_KEYS = {
    "salaryIncome": "netSalary",
    "housePropertyIncome": "netAnnualValue",
    "capitalGainsIncome": "netCapitalGain",
    "businessIncome": "netProfit",
    "interestIncome": "amount",
    "otherIncome": "amount",
}


def parse_amount(val: Any) -> Decimal:
    """Parse '1,50,000' / 150000 / None into a Decimal (0 when unparseable)."""
    if val is None or val == "":
        return Decimal("0")
    try:
        return Decimal(str(val).replace(",", "").strip() or "0")
    except InvalidOperation:
        return Decimal("0")


def _section(form: dict, key: str) -> dict:
    """Return a form section as a dict, decoding the backend's JSON strings."""
    raw = form.get(key)
    if not raw:
        return {}
    if isinstance(raw, dict):
        return raw
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Tax form %s: section %s is not valid JSON", form.get("id"), key)
        return {}
    return data if isinstance(data, dict) else {}


def _head_total(income: dict, head: str) -> Decimal | None:
    """Sum an income head; None when the head is absent."""
    value = income.get(head)
    if value is None:
        return None
    if isinstance(value, list):
        amount_key = _ITEM_AMOUNT_KEYS[head]
        return sum((parse_amount(item.get(amount_key)) for item in value if isinstance(item, dict)), Decimal("0"))
    return parse_amount(value)


def income_input_from_tax_form(form: dict) -> IncomeTaxInput:
    """Build an IncomeTaxInput from a tax-form record."""
    income = _section(form, "incomeData")
    d80c = _section(form, "deductions80C")
    d80d = _section(form, "deductions80D")
    other_ded = _section(form, "otherDeductions")
    paid = _section(form, "taxPaid")
    personal = _section(form, "personalInfo")

    assessment_year = form.get("assessmentYear") or settings.DEFAULT_ASSESSMENT_YEAR

    capital_gains = _head_total(income, "capitalGainsIncome")
    if capital_gains is None:
        capital_gains = parse_amount(income.get("shortTermCapitalGains")) + parse_amount(income.get("longTermCapitalGains"))

    other = _head_total(income, "otherIncome")
    if other is None:
        other = parse_amount(income.get("dividendIncome")) + parse_amount(income.get("otherSources"))

    dob = personal.get("dateOfBirth") or personal.get("dob") or ""

    return IncomeTaxInput(
        assessment_year=assessment_year,
        age=age_from_dob(dob, assessment_year) if dob else 0,
        salary_income=_head_total(income, "salaryIncome") or Decimal("0"),
        house_property_income=_head_total(income, "housePropertyIncome") or Decimal("0"),
        capital_gains=capital_gains,
        business_income=_head_total(income, "businessIncome") or Decimal("0"),
        interest_income=_head_total(income, "interestIncome") or Decimal("0"),
        other_income=other,
        section_80c=parse_amount(d80c.get("totalAmount")),
        section_80d=parse_amount(d80d.get("totalAmount")),
        other_deductions=parse_amount(other_ded.get("totalAmount")),
        tds=parse_amount(paid.get("tds")),
        advance_tax=parse_amount(paid.get("advanceTax")),
        self_assessment_tax=parse_amount(paid.get("selfAssessmentTax")),
    )


def summary_from_tax_form(form: dict, regime: str = "new") -> TaxBreakdown:
    """Compute the tax summary of a stored tax-form record."""
    inp = income_input_from_tax_form(form)
    logger.info("Computing %s-regime summary for tax form %s (AY %s)", regime, form.get("id"), inp.assessment_year)
    return compute_income_tax(inp, regime)
