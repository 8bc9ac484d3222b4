# app/domain/services/capital_gains.py
"""
Capital gains tax on the sale of a single asset.

Asset classes: equity (shares / equity mutual funds), debt, property, gold.
Long-term debt, property and gold gains use indexed cost of acquisition.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from app.domain.models.tax_rate_config import ITRSlabConfig
from app.domain.services.income_tax import compute_slab_tax, marginal_rate, surcharge_rate

logger = logging.getLogger("capital_gains")

# Days an asset must be held (strictly more than) to be long-term
HOLDING_THRESHOLD_DAYS = {
    "equity": 365,
    "debt": 1095,
    "property": 730,
    "gold": 1095,
}

# Cost Inflation Index, base year FY 2001-02 = 100
COST_INFLATION_INDEX = {
    "2001-02": 100,
    "2002-03": 105,
    "2003-04": 109,
    "2004-05": 113,
    "2005-06": 117,
    "2006-07": 122,
    "2007-08": 129,
    "2008-09": 137,
    "2009-10": 148,
    "2010-11": 167,
    "2011-12": 184,
    "2012-13": 200,
    "2013-14": 220,
    "2014-15": 240,
    "2015-16": 254,
    "2016-17": 264,
    "2017-18": 272,
    "2018-19": 280,
    "2019-20": 289,
    "2020-21": 301,
    "2021-22": 317,
    "2022-23": 331,
    "2023-24": 348,
    "2024-25": 363,
    "2025-26": 376,
}

EQUITY_STCG_RATE = Decimal("15")        # Sec 111A
EQUITY_LTCG_RATE = Decimal("10")        # Sec 112A
EQUITY_LTCG_EXEMPTION = Decimal("100000")
OTHER_LTCG_RATE = Decimal("20")         # Sec 112, with indexation
CESS_RATE = Decimal("4")

# Slabs used for gains taxed at normal rates (old regime, below 60)
_SLAB_CONFIG = ITRSlabConfig()


@dataclass
class CapitalGainsResult:
    asset_type: str
    holding_days: int
    gain_type: str                 # "short" or "long"
    purchase_fy: str
    sale_fy: str
    cost_of_acquisition: Decimal   # indexed where indexation applies
    indexation_applied: bool
    capital_gain: Decimal
    taxable_gain: Decimal
    tax_rate: Decimal              # 0 when computed as incremental slab tax
    tax: Decimal
    surcharge: Decimal
    cess: Decimal
    total_tax: Decimal


def financial_year(d: date) -> str:
    """Financial year label ('2023-24') containing *d*; FY starts 1 April."""
    start = d.year if d.month >= 4 else d.year - 1
    return f"{start}-{str(start + 1)[-2:]}"


def indexed_cost(cost: Decimal, purchase_fy: str, sale_fy: str) -> Decimal:
    """Cost of acquisition scaled by CII(sale FY) / CII(purchase FY), in whole rupees."""
    for fy in (purchase_fy, sale_fy):
        if fy not in COST_INFLATION_INDEX:
            raise ValueError(f"No cost inflation index notified for FY {fy}")
    scaled = cost * COST_INFLATION_INDEX[sale_fy] / COST_INFLATION_INDEX[purchase_fy]
    return scaled.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def calculate_capital_gains(
    asset_type: str,
    purchase_date: date,
    sale_date: date,
    purchase_price: Decimal,
    sale_price: Decimal,
    expenses: Decimal = Decimal("0"),
    other_income: Decimal = Decimal("0"),
    include_other_income: bool = False,
) -> CapitalGainsResult:
    """Classify the gain, apply indexation and compute tax, surcharge and cess.

    Short-term gains on non-equity assets are taxed at slab rates: as the
    extra tax on ``other_income + gain`` when ``include_other_income`` is set,
    otherwise at the marginal slab rate of ``other_income``.
    """
    if asset_type not in HOLDING_THRESHOLD_DAYS:
        raise ValueError(f"Unknown asset type {asset_type!r}")
    if sale_date < purchase_date:
        raise ValueError("sale_date cannot be before purchase_date")

    holding_days = (sale_date - purchase_date).days
    gain_type = "long" if holding_days > HOLDING_THRESHOLD_DAYS[asset_type] else "short"
    purchase_fy, sale_fy = financial_year(purchase_date), financial_year(sale_date)

    indexation = gain_type == "long" and asset_type != "equity"
    cost = indexed_cost(purchase_price, purchase_fy, sale_fy) if indexation else purchase_price

    gain = max(sale_price - cost - expenses, Decimal("0"))
    taxable_gain = gain
    slabs = _SLAB_CONFIG.old_regime_slabs

    if asset_type == "equity":
        if gain_type == "long":
            taxable_gain = max(gain - EQUITY_LTCG_EXEMPTION, Decimal("0"))
            rate = EQUITY_LTCG_RATE
        else:
            rate = EQUITY_STCG_RATE
        tax = taxable_gain * rate / 100
    elif gain_type == "long":
        rate = OTHER_LTCG_RATE
        tax = taxable_gain * rate / 100
    elif include_other_income:
        rate = Decimal("0")
        with_gain, _ = compute_slab_tax(other_income + taxable_gain, slabs)
        without_gain, _ = compute_slab_tax(other_income, slabs)
        tax = with_gain - without_gain
    else:
        rate = marginal_rate(other_income, slabs)
        tax = taxable_gain * rate / 100

    income_for_surcharge = other_income + taxable_gain if include_other_income else taxable_gain
    sc_rate, _ = surcharge_rate(income_for_surcharge, _SLAB_CONFIG.surcharge_slabs_old)
    surcharge = tax * sc_rate / 100
    cess = (tax + surcharge) * CESS_RATE / 100

    logger.debug("%s %s-term gain %s over %d days", asset_type, gain_type, gain, holding_days)

    return CapitalGainsResult(
        asset_type=asset_type,
        holding_days=holding_days,
        gain_type=gain_type,
        purchase_fy=purchase_fy,
        sale_fy=sale_fy,
        cost_of_acquisition=cost,
        indexation_applied=indexation,
        capital_gain=gain,
        taxable_gain=taxable_gain,
        tax_rate=rate,
        tax=tax,
        surcharge=surcharge,
        cess=cess,
        total_tax=tax + surcharge + cess,
    )
