"""Per-genre amount and volume-credit rules.

Each genre maps to its own rule; the constants a rule reads come from the
injected ``PricingTable``. Adding a genre means adding an enum member, a
``GenreRates`` entry and one entry in each rule table below.
"""

from __future__ import annotations

from typing import Callable, Mapping

from returns.result import Result

from theater_billing.core.domain.model.errors import StatementError
from theater_billing.core.domain.model.pricing import (
    DEFAULT_PRICING,
    GenreRates,
    PricingTable,
)
from theater_billing.core.domain.model.theater import Genre, parse_genre

AmountRule = Callable[[GenreRates, int], int]
CreditRule = Callable[[GenreRates, int], int]


# ---- amount rules ----------------------------------------------------------


def _base_plus_overage(rates: GenreRates, audience: int) -> int:
    amount = rates.base_amount
    if audience > rates.audience_threshold:
        amount += rates.over_capacity_per_person * (audience - rates.audience_threshold)
    return amount


def _comedy_amount(rates: GenreRates, audience: int) -> int:
    amount = rates.base_amount
    if audience > rates.audience_threshold:
        amount += rates.over_capacity_amount + (
            rates.over_capacity_per_person * (audience - rates.audience_threshold)
        )
    return amount + rates.amount_per_audience * audience


_AMOUNT_RULES: Mapping[Genre, AmountRule] = {
    Genre.TRAGEDY: _base_plus_overage,
    Genre.COMEDY: _comedy_amount,
    Genre.HISTORY: _base_plus_overage,
    Genre.PASTORAL: _base_plus_overage,
}


# ---- credit rules ----------------------------------------------------------


def _no_extra_credit(rates: GenreRates, audience: int) -> int:
    return 0


def _extra_credit_per_divisor(rates: GenreRates, audience: int) -> int:
    if not rates.extra_volume_divisor:
        return 0
    return audience // rates.extra_volume_divisor


_EXTRA_CREDIT_RULES: Mapping[Genre, CreditRule] = {
    Genre.TRAGEDY: _no_extra_credit,
    Genre.COMEDY: _extra_credit_per_divisor,
    Genre.HISTORY: _no_extra_credit,
    Genre.PASTORAL: _extra_credit_per_divisor,
}

_uncovered = {g.value for g in Genre} - {
    g.value for g in _AMOUNT_RULES.keys() & _EXTRA_CREDIT_RULES.keys()
}
if _uncovered:
    raise ValueError(f"pricing_rules_incomplete: {', '.join(sorted(_uncovered))}")


# ---- public API ------------------------------------------------------------


def amount_for(
    genre: Genre | str, audience: int, pricing: PricingTable = DEFAULT_PRICING
) -> Result[int, StatementError]:
    """Amount owed for one performance, in minor currency units."""
    return parse_genre(genre).map(
        lambda g: _AMOUNT_RULES[g](pricing.for_genre(g), audience)
    )


def volume_credits_for(
    genre: Genre | str, audience: int, pricing: PricingTable = DEFAULT_PRICING
) -> Result[int, StatementError]:
    """Volume credits earned for one performance; never negative."""

    def _credits(g: Genre) -> int:
        rates = pricing.for_genre(g)
        base = max(audience - rates.volume_credit_threshold, 0)
        return base + _EXTRA_CREDIT_RULES[g](rates, audience)

    return parse_genre(genre).map(_credits)
