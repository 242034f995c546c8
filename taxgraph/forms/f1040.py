"""Form 1040, U.S. Individual Income Tax Return.

The root of the return graph. Inputs are fixed at construction; every line is
computed on first read. Schedule 2, Schedule 3 and Form 8959 are declared as
subordinates and attach only when their own trigger predicate holds.

Only W-2 wage income is modeled, so total income and AGI equal wages and the
standard deduction is always taken.
"""

from collections.abc import Iterable
from decimal import Decimal

from taxgraph.engines.brackets import (
    FEDERAL_BRACKETS,
    apply_brackets,
    federal_brackets,
    standard_deduction,
)
from taxgraph.engines.fica import FicaPolicy, fica_policy
from taxgraph.exceptions import UnsupportedTaxYearError
from taxgraph.forms.base import ZERO, Form, Value, line, or_zero, subordinate, sum_defined
from taxgraph.forms.f8959 import F8959
from taxgraph.forms.schedule2 import Schedule2
from taxgraph.forms.schedule3 import Schedule3
from taxgraph.models.enums import FilingStatus
from taxgraph.models.tax_forms import W2, ReturnInput


class F1040(Form):
    designation = "1040"
    sequence = 0

    f8959 = subordinate(F8959)
    schedule2 = subordinate(Schedule2)
    schedule3 = subordinate(Schedule3)

    def __init__(
        self,
        filing_status: FilingStatus | None,
        w2s: Iterable[W2] = (),
        tax_year: int = 2024,
    ):
        super().__init__()
        self._filing_status = filing_status
        self._w2s = tuple(w2s)
        self._tax_year = tax_year
        self._fica = fica_policy(tax_year)
        if tax_year not in FEDERAL_BRACKETS:
            raise UnsupportedTaxYearError(tax_year, "federal bracket")

    @classmethod
    def from_input(cls, data: ReturnInput) -> "F1040":
        return cls(data.filing_status, data.w2s, tax_year=data.tax_year)

    # --- Raw inputs (read-only) ---

    @property
    def filing_status(self) -> FilingStatus | None:
        return self._filing_status

    @property
    def w2s(self) -> tuple[W2, ...]:
        return self._w2s

    @property
    def tax_year(self) -> int:
        return self._tax_year

    @property
    def fica(self) -> FicaPolicy:
        return self._fica

    @property
    def wages(self) -> Decimal:
        return self.l1

    # --- Income ---

    @line
    def l1(self) -> Value:
        """Wages, salaries, tips (W-2 box 1)."""
        return sum((w2.box1_wages for w2 in self.w2s), ZERO)

    @line
    def l9(self) -> Value:
        """Total income."""
        return self.l1

    @line
    def l11(self) -> Value:
        """Adjusted gross income."""
        return self.l9

    @line
    def l12(self) -> Value:
        """Standard deduction; undefined until the filing status is known."""
        if self.filing_status is None:
            return None
        return standard_deduction(self.tax_year, self.filing_status)

    @line
    def l15(self) -> Value:
        """Taxable income."""
        if self.l11 is None or self.l12 is None:
            return None
        return max(self.l11 - self.l12, ZERO)

    # --- Tax ---

    @line
    def l16(self) -> Value:
        if self.l15 is None:
            return None
        return apply_brackets(self.l15, federal_brackets(self.tax_year, self.filing_status))

    @line
    def l23(self) -> Value:
        """Other taxes, from Schedule 2 line 10."""
        if self.schedule2 is None:
            return None
        return self.schedule2.l10

    @line
    def l24(self) -> Value:
        """Total tax."""
        if self.l16 is None:
            return None
        return self.l16 + or_zero(self.l23)

    # --- Payments ---

    @line
    def l25a(self) -> Value:
        """Federal income tax withheld from W-2s."""
        return sum((w2.box2_federal_withheld for w2 in self.w2s), ZERO)

    @line
    def l25c(self) -> Value:
        """Withholding from other forms (Form 8959 line 24)."""
        if self.f8959 is None:
            return None
        return self.f8959.l24

    @line
    def l25d(self) -> Value:
        return self.l25a + or_zero(self.l25c)

    @line
    def l31(self) -> Value:
        """Amount from Schedule 3 line 13."""
        if self.schedule3 is None:
            return None
        return self.schedule3.l13

    @line
    def l32(self) -> Value:
        """Other payments and refundable credits."""
        return sum_defined([self.l31])

    @line
    def l33(self) -> Value:
        """Total payments."""
        return self.l25d + or_zero(self.l32)

    # --- Refund / amount owed ---

    @line
    def l34(self) -> Value:
        """Amount overpaid."""
        if self.l24 is None:
            return None
        overpaid = self.l33 - self.l24
        return overpaid if overpaid > 0 else None

    @line
    def l37(self) -> Value:
        """Amount you owe."""
        if self.l24 is None:
            return None
        owed = self.l24 - self.l33
        return owed if owed > 0 else None
