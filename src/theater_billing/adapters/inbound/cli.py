from __future__ import annotations

import json

from returns.result import Success

from theater_billing.adapters.outbound.json_files import load_invoices, parse_invoices
from theater_billing.adapters.outbound.text_statement import render_text
from theater_billing.core.ports.inbound.compute_statement import ComputeStatementUseCase


def run_cli(usecase: ComputeStatementUseCase, raw: str, percent_factor: int = 100) -> int:
    """
    raw: JSON string, or ``@path`` to a JSON file.
    Example:
      {"customer":"BigCo",
       "performances":[{"playID":"hamlet","audience":55}]}
    """
    try:
        if raw.startswith("@"):
            invoices = load_invoices(raw[1:])
        else:
            invoices = parse_invoices(json.loads(raw))
    except Exception as e:  # noqa: BLE001
        print(f"invalid_input: {e}")
        return 2

    # all-or-nothing: print nothing unless every invoice prices
    rendered: list[str] = []
    for invoice in invoices:
        result = usecase.compute(invoice)
        if not isinstance(result, Success):
            print("[ng]", str(result.failure()))
            return 1
        rendered.append(render_text(result.unwrap(), percent_factor))

    print("\n".join(rendered), end="")
    return 0
