"""Schedule 2 (Form 1040), Additional Taxes."""

from typing import TYPE_CHECKING

from taxgraph.forms.base import Form, Value, line, positive, sum_defined

if TYPE_CHECKING:
    from taxgraph.forms.f1040 import F1040


class Schedule2(Form):
    designation = "Schedule 2"
    sequence = 2

    def __init__(self, f1040: "F1040"):
        super().__init__()
        self.f1040 = f1040

    def is_needed(self) -> bool:
        return positive(self.l10)

    @line
    def l8(self) -> Value:
        """Additional Medicare Tax from Form 8959."""
        f8959 = self.f1040.f8959
        if f8959 is None:
            return None
        return f8959.l18

    @line
    def l10(self) -> Value:
        """Total other taxes. Goes to Form 1040, line 23."""
        return sum_defined([self.l8])
