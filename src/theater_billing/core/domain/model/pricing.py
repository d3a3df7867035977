from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from theater_billing.core.domain.model.theater import Genre


@dataclass(frozen=True)
class GenreRates:
    """Per-genre pricing constants, all money in minor units (cents)."""

    base_amount: int
    audience_threshold: int
    over_capacity_per_person: int
    volume_credit_threshold: int
    # comedy only
    over_capacity_amount: int = 0
    amount_per_audience: int = 0
    # comedy and pastoral; None means no extra credit
    extra_volume_divisor: int | None = None


@dataclass(frozen=True)
class PricingTable:
    rates: Mapping[Genre, GenreRates]
    percent_factor: int = 100

    def __post_init__(self) -> None:
        missing = [g.value for g in Genre if g not in self.rates]
        if missing:
            raise ValueError(f"pricing_table_incomplete: {', '.join(missing)}")
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))

    def for_genre(self, genre: Genre) -> GenreRates:
        return self.rates[genre]

    def replace(self, overrides: Mapping[Genre, GenreRates]) -> "PricingTable":
        merged = dict(self.rates)
        merged.update(overrides)
        return PricingTable(rates=merged, percent_factor=self.percent_factor)


BASE_VOLUME_CREDIT_THRESHOLD = 30

DEFAULT_PRICING = PricingTable(
    rates={
        Genre.TRAGEDY: GenreRates(
            base_amount=40000,
            audience_threshold=30,
            over_capacity_per_person=1000,
            volume_credit_threshold=BASE_VOLUME_CREDIT_THRESHOLD,
        ),
        Genre.COMEDY: GenreRates(
            base_amount=30000,
            audience_threshold=20,
            over_capacity_per_person=500,
            volume_credit_threshold=BASE_VOLUME_CREDIT_THRESHOLD,
            over_capacity_amount=10000,
            amount_per_audience=300,
            extra_volume_divisor=5,
        ),
        Genre.HISTORY: GenreRates(
            base_amount=20000,
            audience_threshold=20,
            over_capacity_per_person=1000,
            volume_credit_threshold=20,
        ),
        Genre.PASTORAL: GenreRates(
            base_amount=40000,
            audience_threshold=20,
            over_capacity_per_person=2500,
            volume_credit_threshold=20,
            extra_volume_divisor=2,
        ),
    }
)
