# app/api/v1/schemas/tax.py
"""Request and response schemas for income tax, advance tax, capital gains and GST."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from app.api.v1.schemas.common import Amount, ResultSchema


# ---------------------------------------------------------------------------
# Income tax
# ---------------------------------------------------------------------------

class IncomeTaxRequest(BaseModel):
    name: str = Field(default="", max_length=255)
    assessment_year: str | None = Field(default=None, description="e.g. 2025-26 (FY 2024-25); defaults to the configured AY")
    regime: Literal["old", "new"] = "new"
    age: int = Field(default=30, ge=0, le=120, description="Age on 31 March of the financial year")

    salary_income: Decimal = Field(default=Decimal("0"), ge=0, description="Gross salary before standard deduction")
    house_property_income: Decimal = Field(default=Decimal("0"), description="Can be negative (interest on home loan)")
    capital_gains: Decimal = Field(default=Decimal("0"), ge=0)
    business_income: Decimal = Field(default=Decimal("0"))
    interest_income: Decimal = Field(default=Decimal("0"), ge=0)
    other_income: Decimal = Field(default=Decimal("0"), ge=0)

    # Deductions (old regime, Chapter VI-A)
    section_80c: Decimal = Field(default=Decimal("0"), ge=0, description="PPF, ELSS, LIC, etc. (max 1.5L)")
    section_80d: Decimal = Field(default=Decimal("0"), ge=0, description="Medical insurance (max 25K, 50K senior)")
    section_80ccd_1b: Decimal = Field(default=Decimal("0"), ge=0, description="NPS additional (max 50K)")
    section_80tta: Decimal = Field(default=Decimal("0"), ge=0, description="Savings interest (80TTA 10K / 80TTB 50K)")
    section_80e: Decimal = Field(default=Decimal("0"), ge=0, description="Education loan interest (no limit)")
    section_80g: Decimal = Field(default=Decimal("0"), ge=0, description="Donations")
    other_deductions: Decimal = Field(default=Decimal("0"), ge=0)

    # Taxes already paid
    tds: Decimal = Field(default=Decimal("0"), ge=0)
    advance_tax: Decimal = Field(default=Decimal("0"), ge=0)
    self_assessment_tax: Decimal = Field(default=Decimal("0"), ge=0)


class TaxBreakdownSchema(ResultSchema):
    regime: str
    assessment_year: str
    gross_total_income: Amount
    standard_deduction: Amount
    total_deductions: Amount
    taxable_income: Amount
    tax_on_income: Amount
    rebate_87a: Amount
    tax_after_rebate: Amount
    surcharge: Amount
    health_cess: Amount
    total_tax_liability: Amount
    taxes_paid: Amount
    tax_payable: Amount
    refund_due: Amount
    effective_rate: Amount
    slab_details: list[dict]
    deduction_details: dict[str, Amount]


class RegimeComparisonResponse(ResultSchema):
    old_regime: TaxBreakdownSchema
    new_regime: TaxBreakdownSchema
    recommended_regime: str
    savings: Amount


# ---------------------------------------------------------------------------
# Advance tax
# ---------------------------------------------------------------------------

class AdvanceTaxRequest(BaseModel):
    estimated_taxable_income: Decimal = Field(default=Decimal("1500000"), ge=0, description="Income after deductions")
    regime: Literal["old", "new"] = "new"
    assessment_year: str | None = None
    age: int = Field(default=30, ge=0, le=120)
    tds: Decimal = Field(default=Decimal("0"), ge=0)
    advance_tax_paid: Decimal = Field(default=Decimal("0"), ge=0)
    presumptive: bool = Field(default=False, description="Presumptive income u/s 44AD / 44ADA")


class AdvanceTaxInstalmentSchema(ResultSchema):
    due_date: date
    cumulative_percent: Amount
    cumulative_amount: Amount
    amount: Amount


class AdvanceTaxResponse(ResultSchema):
    assessment_year: str
    regime: str
    total_tax_liability: Amount
    tds: Amount
    advance_tax_paid: Amount
    net_advance_tax: Amount
    advance_tax_required: bool
    instalments: list[AdvanceTaxInstalmentSchema]


# ---------------------------------------------------------------------------
# Capital gains
# ---------------------------------------------------------------------------

class CapitalGainsRequest(BaseModel):
    asset_type: Literal["equity", "debt", "property", "gold"] = "equity"
    purchase_date: date
    sale_date: date
    purchase_price: Decimal = Field(ge=0)
    sale_price: Decimal = Field(ge=0)
    expenses: Decimal = Field(default=Decimal("0"), ge=0, description="Brokerage, transfer costs, improvements")
    other_income: Decimal = Field(default=Decimal("0"), ge=0)
    include_other_income: bool = False

    @model_validator(mode="after")
    def _dates_in_order(self):
        if self.sale_date < self.purchase_date:
            raise ValueError("sale_date cannot be before purchase_date")
        return self


class CapitalGainsResponse(ResultSchema):
    asset_type: str
    holding_days: int
    gain_type: str
    purchase_fy: str
    sale_fy: str
    cost_of_acquisition: Amount
    indexation_applied: bool
    capital_gain: Amount
    taxable_gain: Amount
    tax_rate: Amount
    tax: Amount
    surcharge: Amount
    cess: Amount
    total_tax: Amount


# ---------------------------------------------------------------------------
# GST
# ---------------------------------------------------------------------------

class GstRequest(BaseModel):
    amount: Decimal = Field(default=Decimal("10000"), ge=0)
    gst_rate: Decimal = Field(default=Decimal("18"), ge=0, le=100, description="Usually 0, 0.25, 3, 5, 12, 18 or 28")
    inclusive: bool = Field(default=False, description="Amount already includes GST")
    intra_state: bool = Field(default=True, description="CGST + SGST; otherwise IGST")


class GstResponse(ResultSchema):
    gst_rate: Amount
    inclusive: bool
    net_amount: Amount
    gst_amount: Amount
    gross_amount: Amount
    cgst: Amount
    sgst: Amount
    igst: Amount
