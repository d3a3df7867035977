from __future__ import annotations

from dataclasses import dataclass

from fastapi import FastAPI

from theater_billing.adapters.inbound.web.fastapi_app import create_app
from theater_billing.adapters.outbound.in_memory_plays import InMemoryPlayCatalog
from theater_billing.adapters.outbound.json_files import load_plays
from theater_billing.config import Settings, configure_logging
from theater_billing.core.domain.model.pricing import PricingTable
from theater_billing.core.domain.model.theater import Play
from theater_billing.core.domain.service.statement_service import (
    ComputeStatementDeps,
    ComputeStatementService,
)

DEFAULT_PLAYS = (
    Play(play_id="hamlet", name="Hamlet", type="tragedy"),
    Play(play_id="as-like", name="As You Like It", type="comedy"),
    Play(play_id="othello", name="Othello", type="tragedy"),
    Play(play_id="henry-v", name="Henry V", type="history"),
    Play(play_id="winters-tale", name="The Winter's Tale", type="pastoral"),
)


@dataclass(frozen=True)
class UseCases:
    compute_statement: ComputeStatementService
    catalog: InMemoryPlayCatalog
    pricing: PricingTable


def build_usecases(settings: Settings | None = None) -> UseCases:
    settings = settings or Settings.from_env()

    plays = load_plays(settings.plays_file) if settings.plays_file else DEFAULT_PLAYS
    catalog = InMemoryPlayCatalog.of(plays)
    pricing = settings.load_pricing()

    compute = ComputeStatementService(
        ComputeStatementDeps(find_play=catalog.find, pricing=pricing)
    )
    return UseCases(compute_statement=compute, catalog=catalog, pricing=pricing)


def build_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings)
    usecases = build_usecases(settings)
    return create_app(usecases.compute_statement, usecases.catalog, usecases.pricing)


def create_asgi_app() -> FastAPI:
    return build_app()
