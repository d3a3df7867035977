from __future__ import annotations

import sys

import uvicorn

from theater_billing.adapters.inbound.cli import run_cli
from theater_billing.bootstrap import build_usecases
from theater_billing.config import Settings, configure_logging


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("usage: theater-statement '<invoice json>' | @invoices.json")
        return 2

    try:
        settings = Settings.from_env()
        configure_logging(settings)
        usecases = build_usecases(settings)
    except (ValueError, KeyError, TypeError, OSError) as e:
        # pydantic.ValidationError and json.JSONDecodeError are ValueErrors
        print(f"invalid_input: {e}")
        return 2

    return run_cli(
        usecases.compute_statement, argv[0], percent_factor=usecases.pricing.percent_factor
    )


def serve() -> None:
    uvicorn.run(
        "theater_billing.bootstrap:create_asgi_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=False,
    )


if __name__ == "__main__":
    raise SystemExit(main())
