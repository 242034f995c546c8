"""Form 8959, Additional Medicare Tax.

Part I computes 0.9% on wages over the filing-status threshold.
Part V reconciles Medicare tax withheld against the regular 1.45% rate; the
excess is Additional Medicare Tax already withheld, carried to Form 1040 line 25c.
Parts II-IV (self-employment and RRTA) have no input here and are omitted.
"""

from decimal import Decimal
from typing import TYPE_CHECKING

from taxgraph.forms.base import ZERO, Form, Value, line, positive

if TYPE_CHECKING:
    from taxgraph.forms.f1040 import F1040


class F8959(Form):
    designation = "8959"
    sequence = 71

    def __init__(self, f1040: "F1040"):
        super().__init__()
        self.f1040 = f1040

    def is_needed(self) -> bool:
        return positive(self.l18)

    @line
    def l1(self) -> Value:
        """Medicare wages and tips."""
        return self.f1040.wages

    @line
    def l4(self) -> Value:
        return self.l1

    @line
    def l5(self) -> Value:
        """Threshold for the filing status; undefined when the status is unset."""
        if self.f1040.filing_status is None:
            return None
        return self.f1040.fica.additional_medicare_tax_threshold(self.f1040.filing_status)

    @line
    def l6(self) -> Value:
        if self.l4 is None or self.l5 is None:
            return None
        return max(self.l4 - self.l5, ZERO)

    @line
    def l7(self) -> Value:
        """Additional Medicare Tax on Medicare wages."""
        if self.l6 is None:
            return None
        return self.l6 * self.f1040.fica.additional_medicare_tax_rate

    @line
    def l18(self) -> Value:
        """Total Additional Medicare Tax. Goes to Schedule 2, line 8."""
        return self.l7

    @line
    def l19(self) -> Value:
        """Medicare tax withheld (W-2 box 6)."""
        return sum((w2.box6_medicare_withheld for w2 in self.f1040.w2s), Decimal("0"))

    @line
    def l20(self) -> Value:
        return self.l1

    @line
    def l21(self) -> Value:
        # Regular-rate withholding stops at the threshold.
        if self.l20 is None or self.l5 is None:
            return None
        return min(self.l20, self.l5) * self.f1040.fica.regular_medicare_tax_rate

    @line
    def l22(self) -> Value:
        """Additional Medicare Tax withholding on Medicare wages."""
        if self.l19 is None or self.l21 is None:
            return None
        return max(self.l19 - self.l21, ZERO)

    @line
    def l24(self) -> Value:
        """Total Additional Medicare Tax withholding. Goes to Form 1040, line 25c."""
        return self.l22
