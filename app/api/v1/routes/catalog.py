# app/api/v1/routes/catalog.py
"""Catalogue of available calculators."""

from __future__ import annotations

from fastapi import APIRouter

from app.api.v1.envelope import ok

router = APIRouter(prefix="/calculators", tags=["Calculators"])

# (slug, display name, category, endpoint)
CALCULATORS = [
    ("compound-interest", "Compound Interest Calculator", "savings", "/api/v1/calculators/compound-interest"),
    ("sip", "SIP Calculator", "investments", "/api/v1/calculators/sip"),
    ("lumpsum", "Lumpsum Calculator", "investments", "/api/v1/calculators/lumpsum"),
    ("ppf", "PPF Calculator", "savings", "/api/v1/calculators/ppf"),
    ("rd", "Recurring Deposit Calculator", "savings", "/api/v1/calculators/rd"),
    ("fd", "Fixed Deposit Calculator", "savings", "/api/v1/calculators/fd"),
    ("nps", "NPS Calculator", "retirement", "/api/v1/calculators/nps"),
    ("retirement", "Retirement Planning Calculator", "retirement", "/api/v1/calculators/retirement"),
    ("loan-emi", "Loan EMI Calculator", "loans", "/api/v1/calculators/loan-emi"),
    ("home-loan", "Home Loan EMI Calculator", "loans", "/api/v1/calculators/home-loan"),
    ("car-loan", "Car Loan EMI Calculator", "loans", "/api/v1/calculators/car-loan"),
    ("personal-loan", "Personal Loan EMI Calculator", "loans", "/api/v1/calculators/personal-loan"),
    ("education-loan", "Education Loan EMI Calculator", "loans", "/api/v1/calculators/education-loan"),
    ("lap", "Loan Against Property Calculator", "loans", "/api/v1/calculators/lap"),
    ("gratuity", "Gratuity Calculator", "salary", "/api/v1/calculators/gratuity"),
    ("hra", "HRA Exemption Calculator", "salary", "/api/v1/calculators/hra"),
    ("epf", "EPF Calculator", "salary", "/api/v1/calculators/epf"),
    ("take-home-salary", "Take Home Salary Calculator", "salary", "/api/v1/calculators/take-home-salary"),
    ("tds", "TDS Calculator", "tax", "/api/v1/calculators/tds"),
    ("advance-tax", "Advance Tax Calculator", "tax", "/api/v1/calculators/advance-tax"),
    ("capital-gains", "Capital Gains Tax Calculator", "tax", "/api/v1/calculators/capital-gains"),
    ("gst", "GST Calculator", "tax", "/api/v1/calculators/gst"),
    ("income-tax", "Income Tax Calculator", "tax", "/api/v1/income-tax/compute"),
    ("regime-comparison", "Old vs New Regime Comparison", "tax", "/api/v1/income-tax/compare"),
]


@router.get("", response_model=dict)
async def list_calculators(category: str | None = None):
    """List calculators, optionally filtered by category."""
    items = [
        {"slug": slug, "name": name, "category": cat, "endpoint": endpoint}
        for slug, name, cat, endpoint in CALCULATORS
        if category is None or cat == category
    ]
    return ok(data=items)
