"""Schedule 3 (Form 1040), Additional Credits and Payments."""

from typing import TYPE_CHECKING

from taxgraph.engines.fica import excess_ss_withholding
from taxgraph.forms.base import Form, Value, line, positive, sum_defined

if TYPE_CHECKING:
    from taxgraph.forms.f1040 import F1040


class Schedule3(Form):
    designation = "Schedule 3"
    sequence = 3

    def __init__(self, f1040: "F1040"):
        super().__init__()
        self.f1040 = f1040

    def is_needed(self) -> bool:
        return positive(self.l13)

    @line
    def l10(self) -> Value:
        """Excess Social Security tax withheld by two or more employers."""
        return excess_ss_withholding(self.f1040.w2s, self.f1040.wages, self.f1040.fica)

    @line
    def l13(self) -> Value:
        """Total other payments and refundable credits. Goes to Form 1040, line 31."""
        return sum_defined([self.l10])
