from __future__ import annotations

from theater_billing.bootstrap import build_app

app = build_app()
