from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from theater_billing.core.domain.model.theater import Play
from theater_billing.core.ports.outbound.plays import PlayCatalog


@dataclass(frozen=True)
class InMemoryPlayCatalog(PlayCatalog):
    _plays: Mapping[str, Play] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # freeze a private copy so callers cannot mutate the catalog
        object.__setattr__(self, "_plays", MappingProxyType(dict(self._plays)))

    @staticmethod
    def of(plays: Iterable[Play]) -> "InMemoryPlayCatalog":
        return InMemoryPlayCatalog({p.play_id: p for p in plays})

    def find(self, play_id: str) -> Play | None:
        return self._plays.get(play_id)

    def plays(self) -> Sequence[Play]:
        return tuple(self._plays.values())
