"""Report output models."""

from decimal import Decimal

from pydantic import BaseModel

from taxgraph.models.enums import FilingStatus


class FormLines(BaseModel):
    designation: str
    sequence: int
    lines: dict[str, Decimal | None]


class ReturnSummary(BaseModel):
    """Every filed form with its computed lines, root first."""

    tax_year: int
    filing_status: FilingStatus | None
    forms: list[FormLines]

    @property
    def attachments(self) -> list[str]:
        """Designations of the attached subordinate forms, in filing order."""
        return [f.designation for f in self.forms[1:]]

    def form(self, designation: str) -> FormLines | None:
        for f in self.forms:
            if f.designation == designation:
                return f
        return None
