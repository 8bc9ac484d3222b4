# app/domain/services/tax_rate_defaults.py
"""
Income-tax parameters for each supported assessment year.

Old-regime slabs, rebate and Chapter VI-A caps have not changed across these
years; the new regime was revised in Budget 2023, Budget 2024 and Budget 2025.
"""

from __future__ import annotations

from decimal import Decimal

from app.domain.models.tax_rate_config import ITRSlabConfig


def _ay_2023_24() -> ITRSlabConfig:
    return ITRSlabConfig(
        assessment_year="2023-24",
        new_regime_slabs=[
            (Decimal("250000"), Decimal("0")),
            (Decimal("500000"), Decimal("5")),
            (Decimal("750000"), Decimal("10")),
            (Decimal("1000000"), Decimal("15")),
            (Decimal("1250000"), Decimal("20")),
            (Decimal("1500000"), Decimal("25")),
            (None, Decimal("30")),
        ],
        rebate_87a_new_limit=Decimal("500000"),
        rebate_87a_new_max=Decimal("12500"),
        new_regime_marginal_relief=False,
        # No standard deduction under the new regime before FY 2023-24
        standard_deduction_new_regime=Decimal("0"),
        surcharge_slabs_new=[
            (Decimal("5000000"), Decimal("10000000"), Decimal("10")),
            (Decimal("10000000"), Decimal("20000000"), Decimal("15")),
            (Decimal("20000000"), Decimal("50000000"), Decimal("25")),
            (Decimal("50000000"), None, Decimal("37")),
        ],
    )


def _ay_2024_25() -> ITRSlabConfig:
    return ITRSlabConfig(
        assessment_year="2024-25",
        new_regime_slabs=[
            (Decimal("300000"), Decimal("0")),
            (Decimal("600000"), Decimal("5")),
            (Decimal("900000"), Decimal("10")),
            (Decimal("1200000"), Decimal("15")),
            (Decimal("1500000"), Decimal("20")),
            (None, Decimal("30")),
        ],
        standard_deduction_new_regime=Decimal("50000"),
    )


def _ay_2025_26() -> ITRSlabConfig:
    # Budget 2024 slabs are the dataclass defaults
    return ITRSlabConfig(assessment_year="2025-26")


def _ay_2026_27() -> ITRSlabConfig:
    return ITRSlabConfig(
        assessment_year="2026-27",
        new_regime_slabs=[
            (Decimal("400000"), Decimal("0")),
            (Decimal("800000"), Decimal("5")),
            (Decimal("1200000"), Decimal("10")),
            (Decimal("1600000"), Decimal("15")),
            (Decimal("2000000"), Decimal("20")),
            (Decimal("2400000"), Decimal("25")),
            (None, Decimal("30")),
        ],
        rebate_87a_new_limit=Decimal("1200000"),
        rebate_87a_new_max=Decimal("60000"),
    )


_BUILDERS = {
    "2023-24": _ay_2023_24,
    "2024-25": _ay_2024_25,
    "2025-26": _ay_2025_26,
    "2026-27": _ay_2026_27,
}

SUPPORTED_ASSESSMENT_YEARS = tuple(_BUILDERS)


def default_itr_slabs(assessment_year: str = "2025-26") -> ITRSlabConfig:
    """Return the slab config for the given AY.

    Raises:
        ValueError: if the assessment year is not supported.
    """
    builder = _BUILDERS.get(assessment_year.strip())
    if builder is None:
        raise ValueError(
            f"Unsupported assessment year {assessment_year!r}; "
            f"expected one of {', '.join(SUPPORTED_ASSESSMENT_YEARS)}"
        )
    return builder()
