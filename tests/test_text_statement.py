"""Tests for the plain-text statement report."""

from theater_billing.adapters.outbound.text_statement import render_text, usd
from theater_billing.core.domain.model.theater import LineItem, StatementResult
from theater_billing.core.domain.service.statement_service import compute_statement

BIG_CO_STATEMENT = (
    "Statement for BigCo\n"
    "  Hamlet: $650.00 (55 seats)\n"
    "  As You Like It: $580.00 (35 seats)\n"
    "  Othello: $500.00 (40 seats)\n"
    "Amount owed is $1,730.00\n"
    "You earned 47 credits\n"
)


class TestUsd:
    def test_formats_cents(self):
        assert usd(0) == "$0.00"
        assert usd(5) == "$0.05"
        assert usd(65000) == "$650.00"
        assert usd(173000) == "$1,730.00"
        assert usd(123456789) == "$1,234,567.89"


class TestRenderText:
    def test_big_co_statement(self, big_co, catalog):
        result = compute_statement(big_co, catalog.find).unwrap()
        assert render_text(result) == BIG_CO_STATEMENT

    def test_empty_statement(self):
        result = StatementResult("Nobody", (), 0, 0)
        assert render_text(result) == (
            "Statement for Nobody\nAmount owed is $0.00\nYou earned 0 credits\n"
        )

    def test_line_layout(self):
        line = LineItem("henry-v", "Henry V", 25000, 25, 5)
        text = render_text(StatementResult("Acme", (line,), 25000, 5))
        assert "  Henry V: $250.00 (25 seats)\n" in text
