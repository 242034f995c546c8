"""Tax bracket configuration.

Federal ordinary income brackets and standard deductions.
Keyed by tax year and filing status. Never hardcode brackets in computation functions.

Sources:
  - 2023: IRS Rev. Proc. 2022-38
  - 2024: IRS Rev. Proc. 2023-34
  - 2025: IRS Rev. Proc. 2024-40

Qualifying surviving spouse uses the joint (MFJ) amounts.
"""

from decimal import ROUND_HALF_UP, Decimal

from taxgraph.exceptions import UnsupportedTaxYearError
from taxgraph.models.enums import FilingStatus

Brackets = list[tuple[Decimal | None, Decimal]]

# ---------------------------------------------------------------------------
# Federal ordinary income brackets: {year: {filing_status: [(upper_bound, rate), ...]}}
# Upper bound is Decimal or None for the top bracket.
# ---------------------------------------------------------------------------
FEDERAL_BRACKETS: dict[int, dict[FilingStatus, Brackets]] = {
    2023: {
        FilingStatus.SINGLE: [
            (Decimal("11000"), Decimal("0.10")),
            (Decimal("44725"), Decimal("0.12")),
            (Decimal("95375"), Decimal("0.22")),
            (Decimal("182100"), Decimal("0.24")),
            (Decimal("231250"), Decimal("0.32")),
            (Decimal("578125"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.MFJ: [
            (Decimal("22000"), Decimal("0.10")),
            (Decimal("89450"), Decimal("0.12")),
            (Decimal("190750"), Decimal("0.22")),
            (Decimal("364200"), Decimal("0.24")),
            (Decimal("462500"), Decimal("0.32")),
            (Decimal("693750"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.MFS: [
            (Decimal("11000"), Decimal("0.10")),
            (Decimal("44725"), Decimal("0.12")),
            (Decimal("95375"), Decimal("0.22")),
            (Decimal("182100"), Decimal("0.24")),
            (Decimal("231250"), Decimal("0.32")),
            (Decimal("346875"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.HOH: [
            (Decimal("15700"), Decimal("0.10")),
            (Decimal("59850"), Decimal("0.12")),
            (Decimal("95350"), Decimal("0.22")),
            (Decimal("182100"), Decimal("0.24")),
            (Decimal("231250"), Decimal("0.32")),
            (Decimal("578100"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.QSS: [
            (Decimal("22000"), Decimal("0.10")),
            (Decimal("89450"), Decimal("0.12")),
            (Decimal("190750"), Decimal("0.22")),
            (Decimal("364200"), Decimal("0.24")),
            (Decimal("462500"), Decimal("0.32")),
            (Decimal("693750"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
    },
    2024: {
        FilingStatus.SINGLE: [
            (Decimal("11600"), Decimal("0.10")),
            (Decimal("47150"), Decimal("0.12")),
            (Decimal("100525"), Decimal("0.22")),
            (Decimal("191950"), Decimal("0.24")),
            (Decimal("243725"), Decimal("0.32")),
            (Decimal("609350"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.MFJ: [
            (Decimal("23200"), Decimal("0.10")),
            (Decimal("94300"), Decimal("0.12")),
            (Decimal("201050"), Decimal("0.22")),
            (Decimal("383900"), Decimal("0.24")),
            (Decimal("487450"), Decimal("0.32")),
            (Decimal("731200"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.MFS: [
            (Decimal("11600"), Decimal("0.10")),
            (Decimal("47150"), Decimal("0.12")),
            (Decimal("100525"), Decimal("0.22")),
            (Decimal("191950"), Decimal("0.24")),
            (Decimal("243725"), Decimal("0.32")),
            (Decimal("365600"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.HOH: [
            (Decimal("16550"), Decimal("0.10")),
            (Decimal("63100"), Decimal("0.12")),
            (Decimal("100500"), Decimal("0.22")),
            (Decimal("191950"), Decimal("0.24")),
            (Decimal("243700"), Decimal("0.32")),
            (Decimal("609350"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.QSS: [
            (Decimal("23200"), Decimal("0.10")),
            (Decimal("94300"), Decimal("0.12")),
            (Decimal("201050"), Decimal("0.22")),
            (Decimal("383900"), Decimal("0.24")),
            (Decimal("487450"), Decimal("0.32")),
            (Decimal("731200"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
    },
    2025: {
        FilingStatus.SINGLE: [
            (Decimal("11925"), Decimal("0.10")),
            (Decimal("48475"), Decimal("0.12")),
            (Decimal("103350"), Decimal("0.22")),
            (Decimal("197300"), Decimal("0.24")),
            (Decimal("250525"), Decimal("0.32")),
            (Decimal("626350"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.MFJ: [
            (Decimal("23850"), Decimal("0.10")),
            (Decimal("96950"), Decimal("0.12")),
            (Decimal("206700"), Decimal("0.22")),
            (Decimal("394600"), Decimal("0.24")),
            (Decimal("501050"), Decimal("0.32")),
            (Decimal("751600"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.MFS: [
            (Decimal("11925"), Decimal("0.10")),
            (Decimal("48475"), Decimal("0.12")),
            (Decimal("103350"), Decimal("0.22")),
            (Decimal("197300"), Decimal("0.24")),
            (Decimal("250525"), Decimal("0.32")),
            (Decimal("375800"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.HOH: [
            (Decimal("17000"), Decimal("0.10")),
            (Decimal("64850"), Decimal("0.12")),
            (Decimal("103350"), Decimal("0.22")),
            (Decimal("197300"), Decimal("0.24")),
            (Decimal("250500"), Decimal("0.32")),
            (Decimal("626350"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
        FilingStatus.QSS: [
            (Decimal("23850"), Decimal("0.10")),
            (Decimal("96950"), Decimal("0.12")),
            (Decimal("206700"), Decimal("0.22")),
            (Decimal("394600"), Decimal("0.24")),
            (Decimal("501050"), Decimal("0.32")),
            (Decimal("751600"), Decimal("0.35")),
            (None, Decimal("0.37")),
        ],
    },
}

# ---------------------------------------------------------------------------
# Federal standard deduction
# ---------------------------------------------------------------------------
FEDERAL_STANDARD_DEDUCTION: dict[int, dict[FilingStatus, Decimal]] = {
    2023: {
        FilingStatus.SINGLE: Decimal("13850"),
        FilingStatus.MFJ: Decimal("27700"),
        FilingStatus.MFS: Decimal("13850"),
        FilingStatus.HOH: Decimal("20800"),
        FilingStatus.QSS: Decimal("27700"),
    },
    2024: {
        FilingStatus.SINGLE: Decimal("14600"),
        FilingStatus.MFJ: Decimal("29200"),
        FilingStatus.MFS: Decimal("14600"),
        FilingStatus.HOH: Decimal("21900"),
        FilingStatus.QSS: Decimal("29200"),
    },
    2025: {
        FilingStatus.SINGLE: Decimal("15000"),
        FilingStatus.MFJ: Decimal("30000"),
        FilingStatus.MFS: Decimal("15000"),
        FilingStatus.HOH: Decimal("22500"),
        FilingStatus.QSS: Decimal("30000"),
    },
}

CENT = Decimal("0.01")


def federal_brackets(tax_year: int, filing_status: FilingStatus) -> Brackets:
    try:
        return FEDERAL_BRACKETS[tax_year][filing_status]
    except KeyError:
        raise UnsupportedTaxYearError(tax_year, "federal bracket") from None


def standard_deduction(tax_year: int, filing_status: FilingStatus) -> Decimal:
    try:
        return FEDERAL_STANDARD_DEDUCTION[tax_year][filing_status]
    except KeyError:
        raise UnsupportedTaxYearError(tax_year, "standard deduction") from None


def apply_brackets(income: Decimal, brackets: Brackets) -> Decimal:
    """Apply progressive tax brackets to income, rounded to cents."""
    tax = Decimal("0")
    prev_bound = Decimal("0")

    for upper_bound, rate in brackets:
        if upper_bound is None:
            taxable_in_bracket = max(income - prev_bound, Decimal("0"))
        else:
            taxable_in_bracket = max(
                min(income, upper_bound) - prev_bound, Decimal("0")
            )
        tax += taxable_in_bracket * rate
        if upper_bound is None or income <= upper_bound:
            break
        prev_bound = upper_bound

    return tax.quantize(CENT, rounding=ROUND_HALF_UP)
