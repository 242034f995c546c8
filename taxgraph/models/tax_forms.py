"""Input document models (W-2 and the return input document)."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from taxgraph.models.enums import FilingStatus


class W2(BaseModel):
    """Wage and Tax Statement. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    employer_name: str = ""
    employer_ein: str | None = None
    tax_year: int | None = None
    box1_wages: Decimal = Field(default=Decimal("0"), ge=0)
    box2_federal_withheld: Decimal = Field(default=Decimal("0"), ge=0)
    box3_ss_wages: Decimal | None = None
    box4_ss_withheld: Decimal = Field(default=Decimal("0"), ge=0)
    box5_medicare_wages: Decimal | None = None
    box6_medicare_withheld: Decimal = Field(default=Decimal("0"), ge=0)


class ReturnInput(BaseModel):
    """Everything needed to construct a Form 1040.

    ``filing_status`` may be omitted to represent an incomplete return.
    """

    model_config = ConfigDict(frozen=True)

    tax_year: int = 2024
    filing_status: FilingStatus | None = None
    w2s: tuple[W2, ...] = ()
