"""FICA policy data and the Social Security excess-withholding rule.

Social Security wage base is inflation-adjusted each year (SSA COLA fact sheets).
Additional Medicare Tax thresholds (IRC Section 3101(b)(2)) are statutory
amounts and NOT inflation-adjusted.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from taxgraph.exceptions import UnsupportedTaxYearError
from taxgraph.models.enums import FilingStatus
from taxgraph.models.tax_forms import W2

logger = logging.getLogger(__name__)

SS_TAX_RATE = Decimal("0.062")  # 6.2% employee share
REGULAR_MEDICARE_TAX_RATE = Decimal("0.0145")  # 1.45% regular rate
ADDITIONAL_MEDICARE_TAX_RATE = Decimal("0.009")
ADDITIONAL_MEDICARE_TAX_THRESHOLD: dict[FilingStatus, Decimal] = {
    FilingStatus.SINGLE: Decimal("200000"),
    FilingStatus.MFJ: Decimal("250000"),
    FilingStatus.MFS: Decimal("125000"),
    FilingStatus.HOH: Decimal("200000"),
    FilingStatus.QSS: Decimal("200000"),
}

SS_WAGE_BASE: dict[int, Decimal] = {
    2023: Decimal("160200"),
    2024: Decimal("168600"),
    2025: Decimal("176100"),
}

CENT = Decimal("0.01")


@dataclass(frozen=True)
class FicaPolicy:
    """FICA constants for one tax year."""

    tax_year: int
    ss_wage_base: Decimal
    ss_tax_rate: Decimal = SS_TAX_RATE
    regular_medicare_tax_rate: Decimal = REGULAR_MEDICARE_TAX_RATE
    additional_medicare_tax_rate: Decimal = ADDITIONAL_MEDICARE_TAX_RATE
    additional_medicare_tax_thresholds: Mapping[FilingStatus, Decimal] = field(
        default_factory=lambda: dict(ADDITIONAL_MEDICARE_TAX_THRESHOLD)
    )

    @property
    def max_ss_tax(self) -> Decimal:
        """Most Social Security tax a single employer may validly withhold."""
        return (self.ss_wage_base * self.ss_tax_rate).quantize(CENT, rounding=ROUND_HALF_UP)

    def additional_medicare_tax_threshold(self, filing_status: FilingStatus) -> Decimal:
        return self.additional_medicare_tax_thresholds[filing_status]


def fica_policy(tax_year: int) -> FicaPolicy:
    """Return the FICA policy for ``tax_year``."""
    if tax_year not in SS_WAGE_BASE:
        raise UnsupportedTaxYearError(tax_year, "FICA")
    return FicaPolicy(tax_year=tax_year, ss_wage_base=SS_WAGE_BASE[tax_year])


def excess_ss_withholding(
    w2s: Sequence[W2], wages: Decimal, policy: FicaPolicy
) -> Decimal | None:
    """Excess Social Security tax withheld by multiple employers.

    Returns None unless every condition holds:
      - more than one W-2
      - total wages exceed the Social Security wage base
      - no single W-2 withheld more than the maximum Social Security tax
        (over-withholding by one employer is refunded by that employer, not credited)
      - summed withholding exceeds the maximum Social Security tax
    """
    if len(w2s) <= 1:
        return None
    if wages <= policy.ss_wage_base:
        return None
    max_tax = policy.max_ss_tax
    over_cap = [w2.employer_name for w2 in w2s if w2.box4_ss_withheld > max_tax]
    if over_cap:
        logger.info(
            "Social Security withholding over %s from %s; no excess credit",
            max_tax, ", ".join(over_cap) or "unnamed employer",
        )
        return None
    excess = sum((w2.box4_ss_withheld for w2 in w2s), Decimal("0")) - max_tax
    if excess <= 0:
        return None
    return excess
