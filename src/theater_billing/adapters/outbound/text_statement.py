from __future__ import annotations

from decimal import Decimal

from theater_billing.core.domain.model.theater import StatementResult


def usd(amount_in_cents: int, percent_factor: int = 100) -> str:
    """Format minor units as US dollars, e.g. 173000 -> ``$1,730.00``."""
    value = Decimal(amount_in_cents) / Decimal(percent_factor)
    return f"${value:,.2f}"


def render_text(result: StatementResult, percent_factor: int = 100) -> str:
    out = [f"Statement for {result.customer}"]
    for line in result.lines:
        out.append(
            f"  {line.play_name}: {usd(line.amount, percent_factor)} ({line.audience} seats)"
        )
    out.append(f"Amount owed is {usd(result.total_amount, percent_factor)}")
    out.append(f"You earned {result.total_volume_credits} credits")
    return "\n".join(out) + "\n"
