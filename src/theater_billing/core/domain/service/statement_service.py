from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Tuple

from returns.pipeline import flow
from returns.pointfree import bind, map_
from returns.result import Failure, Result, Success

from theater_billing.core.domain.model.errors import (
    StatementError,
    UnknownPlay,
    ValidationError,
)
from theater_billing.core.domain.model.pricing import DEFAULT_PRICING, PricingTable
from theater_billing.core.domain.model.theater import (
    Genre,
    Invoice,
    LineItem,
    Performance,
    Play,
    StatementResult,
    parse_genre,
)
from theater_billing.core.domain.service.pricing import amount_for, volume_credits_for
from theater_billing.core.ports.inbound.compute_statement import ComputeStatementUseCase
from theater_billing.core.ports.outbound.plays import PlayLookup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComputeStatementDeps:
    find_play: PlayLookup
    pricing: PricingTable = DEFAULT_PRICING


@dataclass(frozen=True)
class ComputeStatementService(ComputeStatementUseCase):
    deps: ComputeStatementDeps

    def compute(self, invoice: Invoice) -> Result[StatementResult, StatementError]:
        result = compute_statement(invoice, self.deps.find_play, self.deps.pricing)
        if isinstance(result, Failure):
            logger.warning(
                "statement failed for customer=%r: %s", invoice.customer, result.failure()
            )
        return result


def compute_statement(
    invoice: Invoice,
    find_play: PlayLookup,
    pricing: PricingTable = DEFAULT_PRICING,
) -> Result[StatementResult, StatementError]:
    """Price every performance of ``invoice`` and total the results.

    Lines keep the invoice order. The first unknown play or genre aborts the
    whole computation; no partial statement is ever returned.
    """
    return flow(
        invoice,
        _validate_invoice,
        bind(partial(_price_lines, find_play=find_play, pricing=pricing)),
        map_(partial(_summarize, invoice.customer)),
    )


# ---- pure helpers ----------------------------------------------------------


def _validate_invoice(invoice: Invoice) -> Result[Invoice, StatementError]:
    if not invoice.customer.strip():
        return Failure(ValidationError("customer is required"))

    for i, perf in enumerate(invoice.performances):
        if not perf.play_id.strip():
            return Failure(ValidationError(f"performances[{i}].play_id is required"))
        if isinstance(perf.audience, bool) or not isinstance(perf.audience, int):
            return Failure(ValidationError(f"performances[{i}].audience must be an integer"))
        if perf.audience < 0:
            return Failure(ValidationError(f"performances[{i}].audience must be >= 0"))

    return Success(invoice)


def _price_lines(
    invoice: Invoice, find_play: PlayLookup, pricing: PricingTable
) -> Result[Tuple[LineItem, ...], StatementError]:
    lines: list[LineItem] = []
    for perf in invoice.performances:
        priced = _price_performance(perf, find_play, pricing)
        if isinstance(priced, Failure):
            return priced
        lines.append(priced.unwrap())
    return Success(tuple(lines))


def _price_performance(
    perf: Performance, find_play: PlayLookup, pricing: PricingTable
) -> Result[LineItem, StatementError]:
    play = find_play(perf.play_id)
    if play is None:
        return Failure(UnknownPlay(message="play not found", play_id=perf.play_id))

    # genre is validated once here; the engine calls below receive a Genre
    return parse_genre(play.type).bind(lambda genre: _line_for(play, genre, perf, pricing))


def _line_for(
    play: Play, genre: Genre, perf: Performance, pricing: PricingTable
) -> Result[LineItem, StatementError]:
    amount = amount_for(genre, perf.audience, pricing)
    credits = volume_credits_for(genre, perf.audience, pricing)
    if isinstance(amount, Failure):
        return amount
    if isinstance(credits, Failure):
        return credits

    line = LineItem(
        play_id=play.play_id,
        play_name=play.name,
        amount=amount.unwrap(),
        audience=perf.audience,
        volume_credits=credits.unwrap(),
    )
    logger.debug(
        "priced %s (%s): audience=%d amount=%d credits=%d",
        play.play_id,
        genre.value,
        line.audience,
        line.amount,
        line.volume_credits,
    )
    return Success(line)


def _summarize(customer: str, lines: Tuple[LineItem, ...]) -> StatementResult:
    result = StatementResult(
        customer=customer,
        lines=lines,
        total_amount=sum(li.amount for li in lines),
        total_volume_credits=sum(li.volume_credits for li in lines),
    )
    logger.info(
        "statement for %s: %d lines, total=%d, credits=%d",
        customer,
        len(lines),
        result.total_amount,
        result.total_volume_credits,
    )
    return result
