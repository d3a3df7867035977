from __future__ import annotations

from typing import Callable, Protocol, Sequence

from theater_billing.core.domain.model.theater import Play

# read-only capability; returns None for an unknown key
PlayLookup = Callable[[str], Play | None]


class PlayCatalog(Protocol):
    def find(self, play_id: str) -> Play | None: ...

    def plays(self) -> Sequence[Play]: ...
