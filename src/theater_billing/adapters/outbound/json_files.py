"""Loaders for the JSON play catalog and invoice documents.

Plays::

    {"hamlet": {"name": "Hamlet", "type": "tragedy"}, ...}

Invoices (one object or a list of them)::

    {"customer": "BigCo",
     "performances": [{"playID": "hamlet", "audience": 55}, ...]}

Genre labels are kept as given; they are only checked when a statement is
priced.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from theater_billing.core.domain.model.theater import Invoice, Performance, Play


def parse_plays(payload: dict[str, Any]) -> tuple[Play, ...]:
    if not isinstance(payload, dict):
        raise ValueError("plays document must be a JSON object")
    return tuple(
        Play(play_id=str(key), name=str(raw["name"]), type=str(raw["type"]))
        for key, raw in payload.items()
    )


def parse_invoice(payload: dict[str, Any]) -> Invoice:
    performances = tuple(
        Performance(
            play_id=str(p.get("playID", p.get("play_id", ""))),
            audience=_as_int(p["audience"]),
        )
        for p in payload.get("performances", [])
    )
    return Invoice(customer=str(payload.get("customer", "")), performances=performances)


def parse_invoices(payload: Any) -> tuple[Invoice, ...]:
    if isinstance(payload, list):
        return tuple(parse_invoice(x) for x in payload)
    return (parse_invoice(payload),)


def load_plays(path: Path | str) -> tuple[Play, ...]:
    return parse_plays(_read_json(path))


def load_invoices(path: Path | str) -> tuple[Invoice, ...]:
    return parse_invoices(_read_json(path))


def _read_json(path: Path | str) -> Any:
    with Path(path).open(encoding="utf-8") as fh:
        return json.load(fh)


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"audience must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"audience must be an integer, got {value!r}")
        return int(value)
    return int(value)
