from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field
from returns.result import Success

from theater_billing.adapters.outbound.text_statement import render_text, usd
from theater_billing.core.domain.model.errors import (
    StatementError,
    UnknownGenre,
    UnknownPlay,
    ValidationError,
)
from theater_billing.core.domain.model.pricing import DEFAULT_PRICING, PricingTable
from theater_billing.core.domain.model.theater import (
    Invoice,
    Performance,
    StatementResult,
)
from theater_billing.core.ports.inbound.compute_statement import ComputeStatementUseCase
from theater_billing.core.ports.outbound.plays import PlayCatalog

logger = logging.getLogger(__name__)

# ---- HTTP DTOs (adapter layer) ---------------------------------------------


class PerformanceIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    play_id: str = Field(min_length=1, alias="playID", examples=["hamlet"])
    audience: int = Field(ge=0, strict=True, examples=[55])


class StatementRequest(BaseModel):
    customer: str = Field(min_length=1, examples=["BigCo"])
    performances: list[PerformanceIn] = Field(default_factory=list)


class LineItemOut(BaseModel):
    play_id: str
    play_name: str
    amount: int
    amount_display: str
    audience: int
    volume_credits: int


class StatementResponse(BaseModel):
    customer: str
    lines: list[LineItemOut]
    total_amount: int
    total_amount_display: str
    total_volume_credits: int
    text: str


class PlayOut(BaseModel):
    play_id: str
    name: str
    type: str


class ErrorResponse(BaseModel):
    type: str
    message: str
    details: list[dict[str, Any]] | None = None


def _to_invoice(req: StatementRequest) -> Invoice:
    return Invoice(
        customer=req.customer,
        performances=tuple(
            Performance(play_id=p.play_id, audience=p.audience) for p in req.performances
        ),
    )


def _to_response(result: StatementResult, percent_factor: int) -> StatementResponse:
    return StatementResponse(
        customer=result.customer,
        lines=[
            LineItemOut(
                play_id=ln.play_id,
                play_name=ln.play_name,
                amount=ln.amount,
                amount_display=usd(ln.amount, percent_factor),
                audience=ln.audience,
                volume_credits=ln.volume_credits,
            )
            for ln in result.lines
        ],
        total_amount=result.total_amount,
        total_amount_display=usd(result.total_amount, percent_factor),
        total_volume_credits=result.total_volume_credits,
        text=render_text(result, percent_factor),
    )


def _map_error_to_http(err: StatementError) -> tuple[int, ErrorResponse]:
    if isinstance(err, ValidationError):
        return 400, ErrorResponse(type=type(err).__name__, message=str(err))

    if isinstance(err, (UnknownPlay, UnknownGenre)):
        return 422, ErrorResponse(type=type(err).__name__, message=str(err))

    return 500, ErrorResponse(type=type(err).__name__, message=str(err))


def create_app(
    compute_uc: ComputeStatementUseCase,
    catalog: PlayCatalog,
    pricing: PricingTable = DEFAULT_PRICING,
) -> FastAPI:
    app = FastAPI(title="theater_billing")

    # --- exception handlers -------------------------------------------------

    @app.exception_handler(StatementError)
    async def handle_domain_error(_: Request, exc: StatementError) -> JSONResponse:
        status, body = _map_error_to_http(exc)
        return JSONResponse(status_code=status, content=body.model_dump())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        body = ErrorResponse(
            type="RequestValidationError",
            message="invalid request",
            details=[
                {"loc": list(e.get("loc", ())), "msg": e.get("msg", "")}
                for e in exc.errors()
            ],
        )
        return JSONResponse(status_code=400, content=body.model_dump())

    @app.exception_handler(Exception)
    async def handle_unexpected(_: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled error")
        body = ErrorResponse(type=type(exc).__name__, message="internal server error")
        return JSONResponse(status_code=500, content=body.model_dump())

    # --- routes -------------------------------------------------------------

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/plays", response_model=list[PlayOut])
    def list_plays() -> Any:
        return [PlayOut(play_id=p.play_id, name=p.name, type=p.type) for p in catalog.plays()]

    @app.post(
        "/statements",
        response_model=StatementResponse,
        responses={
            400: {"model": ErrorResponse},
            422: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
        },
    )
    def compute_statement(req: StatementRequest) -> Any:
        result = compute_uc.compute(_to_invoice(req))
        if isinstance(result, Success):
            return _to_response(result.unwrap(), pricing.percent_factor)
        raise result.failure()

    @app.post("/statements/text", response_class=PlainTextResponse)
    def compute_statement_text(req: StatementRequest) -> Any:
        result = compute_uc.compute(_to_invoice(req))
        if isinstance(result, Success):
            return PlainTextResponse(render_text(result.unwrap(), pricing.percent_factor))
        raise result.failure()

    return app
