# app/domain/models/tax_rate_config.py
"""
Domain dataclass for per-assessment-year income-tax parameters.

ITRSlabConfig: slabs, rebate, deduction caps, standard deductions,
surcharge slabs and cess for a single assessment year.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

Slab = tuple[Decimal | None, Decimal]
SurchargeSlab = tuple[Decimal, Decimal | None, Decimal]


def _old_surcharge() -> list[SurchargeSlab]:
    return [
        (Decimal("5000000"), Decimal("10000000"), Decimal("10")),
        (Decimal("10000000"), Decimal("20000000"), Decimal("15")),
        (Decimal("20000000"), Decimal("50000000"), Decimal("25")),
        (Decimal("50000000"), None, Decimal("37")),
    ]


def _new_surcharge() -> list[SurchargeSlab]:
    # Highest surcharge under the new regime is capped at 25%
    return [
        (Decimal("5000000"), Decimal("10000000"), Decimal("10")),
        (Decimal("10000000"), Decimal("20000000"), Decimal("15")),
        (Decimal("20000000"), None, Decimal("25")),
    ]


@dataclass
class ITRSlabConfig:
    """All income-tax parameters for one assessment year."""

    assessment_year: str = "2025-26"

    # Progressive slab lists: [(upper_limit_or_None, rate_percent), ...]
    old_regime_slabs: list[Slab] = field(default_factory=lambda: [
        (Decimal("250000"), Decimal("0")),
        (Decimal("500000"), Decimal("5")),
        (Decimal("1000000"), Decimal("20")),
        (None, Decimal("30")),
    ])
    old_regime_senior_slabs: list[Slab] = field(default_factory=lambda: [
        (Decimal("300000"), Decimal("0")),
        (Decimal("500000"), Decimal("5")),
        (Decimal("1000000"), Decimal("20")),
        (None, Decimal("30")),
    ])
    old_regime_super_senior_slabs: list[Slab] = field(default_factory=lambda: [
        (Decimal("500000"), Decimal("0")),
        (Decimal("1000000"), Decimal("20")),
        (None, Decimal("30")),
    ])
    new_regime_slabs: list[Slab] = field(default_factory=lambda: [
        (Decimal("300000"), Decimal("0")),
        (Decimal("700000"), Decimal("5")),
        (Decimal("1000000"), Decimal("10")),
        (Decimal("1200000"), Decimal("15")),
        (Decimal("1500000"), Decimal("20")),
        (None, Decimal("30")),
    ])

    # Rebate u/s 87A
    rebate_87a_old_limit: Decimal = Decimal("500000")
    rebate_87a_old_max: Decimal = Decimal("12500")
    rebate_87a_new_limit: Decimal = Decimal("700000")
    rebate_87a_new_max: Decimal = Decimal("25000")
    # Marginal relief on income just above the new-regime rebate limit (from AY 2024-25)
    new_regime_marginal_relief: bool = True

    # Deduction caps (old regime only)
    section_80c_max: Decimal = Decimal("150000")
    section_80d_max_self: Decimal = Decimal("25000")
    section_80d_max_senior: Decimal = Decimal("50000")
    section_80tta_max: Decimal = Decimal("10000")
    section_80ttb_max: Decimal = Decimal("50000")
    section_80ccd_1b_max: Decimal = Decimal("50000")

    # Standard deduction on salary u/s 16(ia)
    standard_deduction_old_regime: Decimal = Decimal("50000")
    standard_deduction_new_regime: Decimal = Decimal("75000")

    # Surcharge slabs: [(lower_threshold, upper_threshold_or_None, rate_percent), ...]
    surcharge_slabs_old: list[SurchargeSlab] = field(default_factory=_old_surcharge)
    surcharge_slabs_new: list[SurchargeSlab] = field(default_factory=_new_surcharge)

    cess_rate: Decimal = Decimal("4")

    def slabs_for(self, regime: str, age: int = 0) -> list[Slab]:
        """Slab set for *regime*; old-regime slabs depend on age."""
        if regime == "new":
            return self.new_regime_slabs
        if age >= 80:
            return self.old_regime_super_senior_slabs
        if age >= 60:
            return self.old_regime_senior_slabs
        return self.old_regime_slabs

    # ---- serialization ----

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-safe dict for the rates endpoint."""

        def _slab_list(slabs: list[tuple]) -> list[list]:
            return [[str(s[0]) if s[0] is not None else None, str(s[1])] for s in slabs]

        def _surcharge_list(slabs: list[tuple]) -> list[list]:
            return [
                [str(s[0]), str(s[1]) if s[1] is not None else None, str(s[2])]
                for s in slabs
            ]

        return {
            "assessment_year": self.assessment_year,
            "old_regime_slabs": _slab_list(self.old_regime_slabs),
            "old_regime_senior_slabs": _slab_list(self.old_regime_senior_slabs),
            "old_regime_super_senior_slabs": _slab_list(self.old_regime_super_senior_slabs),
            "new_regime_slabs": _slab_list(self.new_regime_slabs),
            "rebate_87a_old_limit": str(self.rebate_87a_old_limit),
            "rebate_87a_old_max": str(self.rebate_87a_old_max),
            "rebate_87a_new_limit": str(self.rebate_87a_new_limit),
            "rebate_87a_new_max": str(self.rebate_87a_new_max),
            "new_regime_marginal_relief": self.new_regime_marginal_relief,
            "section_80c_max": str(self.section_80c_max),
            "section_80d_max_self": str(self.section_80d_max_self),
            "section_80d_max_senior": str(self.section_80d_max_senior),
            "section_80tta_max": str(self.section_80tta_max),
            "section_80ttb_max": str(self.section_80ttb_max),
            "section_80ccd_1b_max": str(self.section_80ccd_1b_max),
            "standard_deduction_old_regime": str(self.standard_deduction_old_regime),
            "standard_deduction_new_regime": str(self.standard_deduction_new_regime),
            "surcharge_slabs_old": _surcharge_list(self.surcharge_slabs_old),
            "surcharge_slabs_new": _surcharge_list(self.surcharge_slabs_new),
            "cess_rate": str(self.cess_rate),
        }
