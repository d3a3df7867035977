from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from returns.result import Failure, Result, Success

from theater_billing.core.domain.model.errors import StatementError, UnknownGenre


class Genre(Enum):
    TRAGEDY = "tragedy"
    COMEDY = "comedy"
    HISTORY = "history"
    PASTORAL = "pastoral"


def parse_genre(label: Genre | str) -> Result[Genre, StatementError]:
    if isinstance(label, Genre):
        return Success(label)
    try:
        return Success(Genre(label))
    except ValueError:
        return Failure(UnknownGenre(message="genre is not supported", genre=str(label)))


@dataclass(frozen=True)
class Play:
    play_id: str
    name: str
    type: str  # raw genre label, parsed when priced


@dataclass(frozen=True)
class Performance:
    play_id: str
    audience: int


@dataclass(frozen=True)
class Invoice:
    customer: str
    performances: Tuple[Performance, ...]


@dataclass(frozen=True)
class LineItem:
    play_id: str
    play_name: str
    amount: int  # minor units
    audience: int
    volume_credits: int


@dataclass(frozen=True)
class StatementResult:
    customer: str
    lines: Tuple[LineItem, ...]
    total_amount: int
    total_volume_credits: int
