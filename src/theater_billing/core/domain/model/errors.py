from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StatementError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover
        return self.message


@dataclass(frozen=True)
class ValidationError(StatementError):
    pass


@dataclass(frozen=True)
class UnknownGenre(StatementError):
    genre: str

    def __str__(self) -> str:  # pragma: no cover
        return f"unknown_genre: {self.genre} ({self.message})"


@dataclass(frozen=True)
class UnknownPlay(StatementError):
    play_id: str

    def __str__(self) -> str:  # pragma: no cover
        return f"unknown_play: {self.play_id} ({self.message})"
