"""Runtime settings and pricing overrides.

Settings come from the environment::

    THEATER_PLAYS_FILE    JSON play catalog (defaults to the built-in one)
    THEATER_PRICING_FILE  JSON pricing overrides (defaults to DEFAULT_PRICING)
    THEATER_LOG_LEVEL     logging level name, default INFO

A pricing file overrides any subset of genres and fields, e.g.::

    {"genres": {"tragedy": {"base_amount": 4000}}}
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from theater_billing.core.domain.model.pricing import (
    DEFAULT_PRICING,
    GenreRates,
    PricingTable,
)
from theater_billing.core.domain.model.theater import Genre


class GenreRatesOverride(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_amount: int | None = Field(default=None, ge=0)
    audience_threshold: int | None = Field(default=None, ge=0)
    over_capacity_per_person: int | None = Field(default=None, ge=0)
    volume_credit_threshold: int | None = Field(default=None, ge=0)
    over_capacity_amount: int | None = Field(default=None, ge=0)
    amount_per_audience: int | None = Field(default=None, ge=0)
    extra_volume_divisor: int | None = Field(default=None, gt=0)

    def apply(self, rates: GenreRates) -> GenreRates:
        return replace(rates, **self.model_dump(exclude_none=True))


# fields that only some genre rules read
_GENRE_ONLY_FIELDS: Mapping[str, frozenset[Genre]] = {
    "over_capacity_amount": frozenset({Genre.COMEDY}),
    "amount_per_audience": frozenset({Genre.COMEDY}),
    "extra_volume_divisor": frozenset({Genre.COMEDY, Genre.PASTORAL}),
}


class PricingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    genres: dict[Genre, GenreRatesOverride] = Field(default_factory=dict)
    percent_factor: int = Field(default=100, gt=0)

    @model_validator(mode="after")
    def _fields_used_by_genre(self) -> "PricingConfig":
        for genre, override in self.genres.items():
            for name in override.model_dump(exclude_none=True):
                allowed = _GENRE_ONLY_FIELDS.get(name)
                if allowed is not None and genre not in allowed:
                    raise ValueError(f"{genre.value} pricing does not use {name}")
        return self

    def to_table(self, base: PricingTable = DEFAULT_PRICING) -> PricingTable:
        overrides: Mapping[Genre, GenreRates] = {
            genre: override.apply(base.for_genre(genre))
            for genre, override in self.genres.items()
        }
        merged = base.replace(overrides)
        return PricingTable(rates=merged.rates, percent_factor=self.percent_factor)


class Settings(BaseModel):
    plays_file: Path | None = None
    pricing_file: Path | None = None
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            plays_file=env.get("THEATER_PLAYS_FILE") or None,
            pricing_file=env.get("THEATER_PRICING_FILE") or None,
            log_level=env.get("THEATER_LOG_LEVEL", "INFO"),
        )

    def load_pricing(self) -> PricingTable:
        if self.pricing_file is None:
            return DEFAULT_PRICING
        with self.pricing_file.open(encoding="utf-8") as fh:
            return PricingConfig.model_validate(json.load(fh)).to_table()


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
