# app/api/v1/routes/income_tax.py
"""
Income-tax endpoints: single-regime computation, old vs new comparison,
computation-sheet PDF, slab tables and summaries of stored tax forms.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import Response

from app.api.v1.deps import get_tax_forms_client, resolve_assessment_year
from app.api.v1.envelope import ok
from app.api.v1.schemas.tax import IncomeTaxRequest, RegimeComparisonResponse, TaxBreakdownSchema
from app.domain.services.income_tax import IncomeTaxInput, compare_regimes, compute_income_tax
from app.domain.services.tax_computation_pdf import generate_tax_computation_pdf
from app.domain.services.tax_form_summary import summary_from_tax_form
from app.domain.services.tax_rate_defaults import SUPPORTED_ASSESSMENT_YEARS, default_itr_slabs
from app.infrastructure.external.tax_forms_client import TaxFormsClient, TaxFormsClientError

logger = logging.getLogger("api.v1.income_tax")

router = APIRouter(prefix="/income-tax", tags=["Income Tax"])


def _to_input(body: IncomeTaxRequest) -> IncomeTaxInput:
    """Convert a request body to the service-layer input dataclass."""
    return IncomeTaxInput(
        assessment_year=resolve_assessment_year(body.assessment_year),
        age=body.age,
        salary_income=body.salary_income,
        house_property_income=body.house_property_income,
        capital_gains=body.capital_gains,
        business_income=body.business_income,
        interest_income=body.interest_income,
        other_income=body.other_income,
        section_80c=body.section_80c,
        section_80d=body.section_80d,
        section_80ccd_1b=body.section_80ccd_1b,
        section_80tta=body.section_80tta,
        section_80e=body.section_80e,
        section_80g=body.section_80g,
        other_deductions=body.other_deductions,
        tds=body.tds,
        advance_tax=body.advance_tax,
        self_assessment_tax=body.self_assessment_tax,
    )


@router.post("/compute", response_model=dict)
async def compute(body: IncomeTaxRequest):
    """Tax liability under the requested regime."""
    breakdown = compute_income_tax(_to_input(body), body.regime)
    return ok(data=TaxBreakdownSchema.model_validate(breakdown).model_dump())


@router.post("/compare", response_model=dict)
async def compare(body: IncomeTaxRequest):
    """Old vs new regime with a recommendation."""
    comparison = compare_regimes(_to_input(body))
    return ok(data=RegimeComparisonResponse.model_validate(comparison).model_dump())


@router.post("/pdf")
async def computation_pdf(body: IncomeTaxRequest):
    """Download the computation sheet for the requested regime as a PDF."""
    inp = _to_input(body)
    comparison = compare_regimes(inp)
    breakdown = comparison.new_regime if body.regime == "new" else comparison.old_regime
    pdf = generate_tax_computation_pdf(inp, breakdown, comparison, name=body.name)
    filename = f"tax_computation_AY{inp.assessment_year}_{body.regime}.pdf"
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/rates", response_model=dict)
async def list_rates():
    """Assessment years with built-in slab tables."""
    return ok(data={"assessment_years": list(SUPPORTED_ASSESSMENT_YEARS)})


@router.get("/rates/{assessment_year}", response_model=dict)
async def get_rates(assessment_year: str):
    """Slabs, rebate, caps, surcharge and cess for one assessment year."""
    return ok(data=default_itr_slabs(assessment_year).to_dict())


@router.get("/tax-forms/{form_id}/summary", response_model=dict)
async def tax_form_summary(
    form_id: str,
    regime: str = Query(default="new", pattern="^(old|new)$"),
    client: TaxFormsClient = Depends(get_tax_forms_client),
):
    """Fetch a stored tax form from the backend and compute its tax summary."""
    try:
        form = await client.get_tax_form(form_id)
    except TaxFormsClientError as exc:
        logger.warning("Tax form %s fetch failed: %s", form_id, exc)
        if exc.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN):
            raise HTTPException(status_code=exc.status_code, detail="Not authorised to read this tax form") from exc
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tax form not found") from exc
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc

    breakdown = summary_from_tax_form(form, regime)
    return ok(data=TaxBreakdownSchema.model_validate(breakdown).model_dump())
