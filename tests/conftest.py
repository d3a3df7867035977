"""Pytest configuration and shared fixtures."""

import pytest

from theater_billing.adapters.outbound.in_memory_plays import InMemoryPlayCatalog
from theater_billing.bootstrap import DEFAULT_PLAYS
from theater_billing.core.domain.model.pricing import DEFAULT_PRICING, GenreRates
from theater_billing.core.domain.model.theater import Genre, Invoice, Performance


@pytest.fixture
def catalog() -> InMemoryPlayCatalog:
    return InMemoryPlayCatalog.of(DEFAULT_PLAYS)


@pytest.fixture
def big_co() -> Invoice:
    return Invoice(
        customer="BigCo",
        performances=(
            Performance("hamlet", 55),
            Performance("as-like", 35),
            Performance("othello", 40),
        ),
    )


@pytest.fixture
def small_pricing():
    """Rates in the scale used by the worked examples (tragedy base $40)."""
    return DEFAULT_PRICING.replace(
        {
            Genre.TRAGEDY: GenreRates(
                base_amount=4000,
                audience_threshold=30,
                over_capacity_per_person=1000,
                volume_credit_threshold=30,
            ),
            Genre.COMEDY: GenreRates(
                base_amount=3000,
                audience_threshold=20,
                over_capacity_per_person=500,
                volume_credit_threshold=30,
                over_capacity_amount=1000,
                amount_per_audience=300,
                extra_volume_divisor=5,
            ),
        }
    )
