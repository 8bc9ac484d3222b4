# app/domain/services/tax_computation_pdf.py
"""
Income-tax computation sheet as a PDF, built with ReportLab.

SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer on an A4 page with
15mm margins.
"""

from __future__ import annotations

import io
import logging
from datetime import datetime
from decimal import Decimal

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from app.domain.services.income_tax import IncomeTaxInput, RegimeComparison, TaxBreakdown

logger = logging.getLogger("tax_computation_pdf")

_HEADER_BG = colors.Color(0.2, 0.3, 0.5)
_TOTAL_ROW_BG = colors.Color(0.9, 0.95, 1.0)
_GRID_COLOR = colors.Color(0.8, 0.8, 0.8)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _fmt(val: Decimal | float | int | None) -> str:
    """Format a numeric value as 'Rs X,XX,XXX' with Indian digit grouping."""
    if val is None:
        return "Rs 0"
    num = round(float(val))
    sign = "-" if num < 0 else ""
    digits = str(abs(num))
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups) + "," + tail
    return f"{sign}Rs {digits}"


def _build_doc(buf: io.BytesIO) -> SimpleDocTemplate:
    return SimpleDocTemplate(
        buf,
        pagesize=A4,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
    )


def _get_styles() -> dict:
    base = getSampleStyleSheet()
    return {
        "title": ParagraphStyle("SheetTitle", parent=base["Heading1"], fontSize=16, alignment=1, spaceAfter=4),
        "subtitle": ParagraphStyle("SheetSubtitle", parent=base["Normal"], fontSize=10, alignment=1, spaceAfter=20),
        "section": ParagraphStyle(
            "SectionHeader", parent=base["Heading2"], fontSize=12,
            spaceBefore=14, spaceAfter=6, textColor=_HEADER_BG,
        ),
        "body": ParagraphStyle("Body", parent=base["Normal"], fontSize=11, leading=16, spaceAfter=6),
        "footer": ParagraphStyle("Footer", parent=base["Normal"], fontSize=8, textColor=colors.grey, alignment=1),
    }


def _table(rows: list[list], col_widths: list[int], total_rows: tuple[int, ...] = (-1,)) -> Table:
    tbl = Table(rows, colWidths=col_widths)
    cmds = [
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("GRID", (0, 0), (-1, -1), 0.5, _GRID_COLOR),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("TOPPADDING", (0, 0), (-1, -1), 6),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
        ("LEFTPADDING", (0, 0), (-1, -1), 8),
        ("RIGHTPADDING", (0, 0), (-1, -1), 8),
        ("BACKGROUND", (0, 0), (-1, 0), _HEADER_BG),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
    ]
    for idx in total_rows:
        cmds.extend([
            ("BACKGROUND", (0, idx), (-1, idx), _TOTAL_ROW_BG),
            ("FONTNAME", (0, idx), (-1, idx), "Helvetica-Bold"),
        ])
    tbl.setStyle(TableStyle(cmds))
    return tbl


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def _income_rows(inp: IncomeTaxInput, bd: TaxBreakdown) -> list[list]:
    rows = [["Income Head", "Amount"], ["Gross Salary", _fmt(inp.salary_income)]]
    heads = [
        ("Income from House Property", inp.house_property_income),
        ("Capital Gains", inp.capital_gains),
        ("Business / Profession", inp.business_income),
        ("Interest Income", inp.interest_income),
        ("Other Sources", inp.other_income),
    ]
    rows.extend([label, _fmt(amount)] for label, amount in heads if amount)
    rows.append(["Gross Total Income", _fmt(bd.gross_total_income)])
    rows.append(["Less: Standard Deduction u/s 16(ia)", _fmt(bd.standard_deduction)])
    rows.append(["Less: Chapter VI-A Deductions", _fmt(bd.total_deductions)])
    rows.append(["Taxable Income", _fmt(bd.taxable_income)])
    return rows


def _tax_rows(bd: TaxBreakdown) -> list[list]:
    rows = [
        ["Particulars", "Amount"],
        ["Tax on Income", _fmt(bd.tax_on_income)],
        ["Less: Rebate u/s 87A", _fmt(bd.rebate_87a)],
        ["Surcharge", _fmt(bd.surcharge)],
        ["Health & Education Cess", _fmt(bd.health_cess)],
        ["Total Tax Liability", _fmt(bd.total_tax_liability)],
        ["Taxes Already Paid", _fmt(bd.taxes_paid)],
    ]
    if bd.refund_due > 0:
        rows.append(["Refund Due", _fmt(bd.refund_due)])
    else:
        rows.append(["Tax Payable", _fmt(bd.tax_payable)])
    return rows


def _comparison_rows(cmp: RegimeComparison) -> list[list]:
    old, new = cmp.old_regime, cmp.new_regime
    return [
        ["Particulars", "Old Regime", "New Regime"],
        ["Taxable Income", _fmt(old.taxable_income), _fmt(new.taxable_income)],
        ["Tax after Rebate", _fmt(old.tax_after_rebate), _fmt(new.tax_after_rebate)],
        ["Surcharge + Cess", _fmt(old.surcharge + old.health_cess), _fmt(new.surcharge + new.health_cess)],
        ["Total Tax Liability", _fmt(old.total_tax_liability), _fmt(new.total_tax_liability)],
    ]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def generate_tax_computation_pdf(
    inp: IncomeTaxInput,
    breakdown: TaxBreakdown,
    comparison: RegimeComparison | None = None,
    name: str = "",
) -> bytes:
    """Render the computation for one regime, optionally with a regime comparison."""
    buf = io.BytesIO()
    doc = _build_doc(buf)
    st = _get_styles()
    regime_label = "New Regime (115BAC)" if breakdown.regime == "new" else "Old Regime"

    elements: list = [
        Paragraph("INCOME TAX COMPUTATION", st["title"]),
        Paragraph(
            f"{name + ' &nbsp;|&nbsp; ' if name else ''}"
            f"Assessment Year: {breakdown.assessment_year} &nbsp;|&nbsp; {regime_label}"
            f" &nbsp;|&nbsp; Generated on {datetime.now().strftime('%d-%b-%Y %H:%M')}",
            st["subtitle"],
        ),
        Paragraph("Income and Deductions", st["section"]),
        _table(_income_rows(inp, breakdown), [310, 150], total_rows=(-1,)),
        Spacer(1, 12),
    ]

    if breakdown.deduction_details:
        rows = [["Section", "Allowed"]]
        rows.extend([section, _fmt(amount)] for section, amount in breakdown.deduction_details.items() if amount)
        rows.append(["Total", _fmt(breakdown.total_deductions)])
        elements += [Paragraph("Chapter VI-A Deductions", st["section"]), _table(rows, [310, 150]), Spacer(1, 12)]

    if breakdown.slab_details:
        rows = [["Slab", "Rate", "Income", "Tax"]]
        rows.extend([s["range"], s["rate"], _fmt(s["income"]), _fmt(s["tax"])] for s in breakdown.slab_details)
        rows.append(["Total", "", _fmt(breakdown.taxable_income), _fmt(breakdown.tax_on_income)])
        elements += [Paragraph("Slab-wise Tax", st["section"]), _table(rows, [160, 60, 120, 120]), Spacer(1, 12)]

    elements += [
        Paragraph("Tax Computation", st["section"]),
        _table(_tax_rows(breakdown), [310, 150], total_rows=(5, -1)),
        Spacer(1, 12),
    ]

    if comparison is not None:
        recommended = "New Regime" if comparison.recommended_regime == "new" else "Old Regime"
        elements += [
            Paragraph("Regime Comparison", st["section"]),
            _table(_comparison_rows(comparison), [220, 120, 120]),
            Spacer(1, 6),
            Paragraph(
                f"<b>Recommended: {recommended}</b>, saving {_fmt(comparison.savings)}."
                if comparison.savings > 0 else "Both regimes result in the same tax liability.",
                st["body"],
            ),
        ]

    elements.append(Paragraph("This is a computer-generated tax computation for planning purposes.", st["footer"]))

    doc.build(elements)
    logger.info("Generated tax computation PDF for AY %s", breakdown.assessment_year)
    return buf.getvalue()
