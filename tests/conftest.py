"""Shared test fixtures for taxgraph."""

import random
from decimal import Decimal

import pytest

from taxgraph.engines.fica import fica_policy
from taxgraph.forms.f1040 import F1040
from taxgraph.models.enums import FilingStatus
from taxgraph.models.tax_forms import W2

CENT = Decimal("0.01")


def make_w2(
    wages: str | Decimal,
    ss_withheld: str | Decimal | None = None,
    medicare_withheld: str | Decimal | None = None,
    federal_withheld: str | Decimal = "0",
    employer_name: str = "Acme Corp",
    tax_year: int = 2024,
) -> W2:
    """W-2 with withholding at the statutory employee rates unless given."""
    wages = Decimal(wages)
    if ss_withheld is None:
        base = fica_policy(tax_year).ss_wage_base
        ss_withheld = (min(wages, base) * Decimal("0.062")).quantize(CENT)
    if medicare_withheld is None:
        medicare_withheld = (wages * Decimal("0.0145")).quantize(CENT)
    return W2(
        employer_name=employer_name,
        tax_year=tax_year,
        box1_wages=wages,
        box2_federal_withheld=Decimal(federal_withheld),
        box4_ss_withheld=Decimal(ss_withheld),
        box6_medicare_withheld=Decimal(medicare_withheld),
    )


def _random_amount(rng: random.Random, high: int) -> Decimal:
    return Decimal(rng.randint(0, high * 100)) / 100


def _random_w2(rng: random.Random, tax_year: int) -> W2:
    policy = fica_policy(tax_year)
    wages = _random_amount(rng, 260_000)
    roll = rng.random()
    if roll < 0.1:
        # Employer over-withheld past the per-employer cap.
        ss = policy.max_ss_tax + _random_amount(rng, 2_000) + CENT
    elif roll < 0.2:
        ss = _random_amount(rng, int(policy.max_ss_tax))
    else:
        ss = (min(wages, policy.ss_wage_base) * policy.ss_tax_rate).quantize(CENT)

    medicare = (wages * policy.regular_medicare_tax_rate).quantize(CENT)
    if wages > 200_000:
        # Employers withhold the additional 0.9% above $200,000 regardless of status.
        medicare += ((wages - 200_000) * policy.additional_medicare_tax_rate).quantize(CENT)
    if rng.random() < 0.1:
        medicare = _random_amount(rng, 8_000)

    return W2(
        employer_name=f"Employer {rng.randint(1, 999)}",
        tax_year=tax_year,
        box1_wages=wages,
        box2_federal_withheld=(wages * Decimal("0.2")).quantize(CENT),
        box4_ss_withheld=ss,
        box6_medicare_withheld=medicare,
    )


def generate_returns(count: int, seed: int = 9000) -> list[F1040]:
    """Seeded population of returns covering every filing status and 0-4 W-2s."""
    rng = random.Random(seed)
    statuses: list[FilingStatus | None] = [*FilingStatus, None]
    returns = []
    for _ in range(count):
        tax_year = rng.choice([2023, 2024, 2025])
        w2s = [_random_w2(rng, tax_year) for _ in range(rng.randint(0, 4))]
        returns.append(F1040(rng.choice(statuses), w2s, tax_year=tax_year))
    return returns


@pytest.fixture
def w2_factory():
    return make_w2


@pytest.fixture
def random_returns() -> list[F1040]:
    return generate_returns(400)


@pytest.fixture
def single_w2() -> W2:
    return make_w2("100000", federal_withheld="15000")


@pytest.fixture
def high_earner_return() -> F1040:
    """Single filer, $300,000 wages, 2024; Additional Medicare Tax applies."""
    return F1040(
        FilingStatus.SINGLE,
        [make_w2("300000", ss_withheld="10453.20", medicare_withheld="5250", federal_withheld="80000")],
        tax_year=2024,
    )


@pytest.fixture
def two_employer_return() -> F1040:
    """Two employers, total wages over the 2023 Social Security wage base."""
    return F1040(
        FilingStatus.SINGLE,
        [
            make_w2("90000", ss_withheld="5500", employer_name="First Co", tax_year=2023),
            make_w2("80000", ss_withheld="4900", employer_name="Second Co", tax_year=2023),
        ],
        tax_year=2023,
    )
