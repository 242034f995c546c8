"""Tests for input document models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from taxgraph.models.enums import FilingStatus
from taxgraph.models.tax_forms import W2, ReturnInput


class TestW2:
    def test_create_w2(self, single_w2):
        assert single_w2.employer_name == "Acme Corp"
        assert single_w2.box1_wages == Decimal("100000")
        assert single_w2.box2_federal_withheld == Decimal("15000")
        # Statutory rates applied by the factory
        assert single_w2.box4_ss_withheld == Decimal("6200.00")
        assert single_w2.box6_medicare_withheld == Decimal("1450.00")

    def test_defaults(self):
        w2 = W2(box1_wages=Decimal("50000"))
        assert w2.box4_ss_withheld == Decimal("0")
        assert w2.box6_medicare_withheld == Decimal("0")
        assert w2.box3_ss_wages is None
        assert w2.box5_medicare_wages is None

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError):
            W2(box1_wages=Decimal("-1"))

    def test_amounts_parse_from_strings(self):
        w2 = W2.model_validate({"box1_wages": "90000.50", "box4_ss_withheld": "5580.03"})
        assert w2.box1_wages == Decimal("90000.50")
        assert w2.box4_ss_withheld == Decimal("5580.03")


class TestReturnInput:
    def test_parse_json(self):
        data = ReturnInput.model_validate_json(
            '{"tax_year": 2023, "filing_status": "MARRIED_FILING_JOINTLY",'
            ' "w2s": [{"employer_name": "A", "box1_wages": "1000"}]}'
        )
        assert data.tax_year == 2023
        assert data.filing_status == FilingStatus.MFJ
        assert len(data.w2s) == 1
        assert data.w2s[0].box1_wages == Decimal("1000")

    def test_filing_status_optional(self):
        data = ReturnInput.model_validate({"w2s": []})
        assert data.filing_status is None
        assert data.tax_year == 2024

    def test_unknown_filing_status_rejected(self):
        with pytest.raises(ValidationError):
            ReturnInput.model_validate({"filing_status": "WIDOWER"})
