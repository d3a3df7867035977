"""Tests for settings and pricing overrides."""

import json

import pytest
from pydantic import ValidationError

from theater_billing.config import PricingConfig, Settings
from theater_billing.core.domain.model.pricing import DEFAULT_PRICING, PricingTable
from theater_billing.core.domain.model.theater import Genre


class TestPricingConfig:
    def test_partial_override_keeps_other_fields(self):
        table = PricingConfig.model_validate(
            {"genres": {"tragedy": {"base_amount": 4000}}}
        ).to_table()

        tragedy = table.for_genre(Genre.TRAGEDY)
        assert tragedy.base_amount == 4000
        assert tragedy.audience_threshold == 30
        assert table.for_genre(Genre.COMEDY) == DEFAULT_PRICING.for_genre(Genre.COMEDY)

    def test_unknown_genre_key_is_rejected(self):
        with pytest.raises(ValidationError):
            PricingConfig.model_validate({"genres": {"opera": {"base_amount": 1}}})

    def test_negative_values_are_rejected(self):
        with pytest.raises(ValidationError):
            PricingConfig.model_validate({"genres": {"comedy": {"base_amount": -1}}})

    @pytest.mark.parametrize(
        "genre, field",
        [
            ("tragedy", "extra_volume_divisor"),
            ("history", "amount_per_audience"),
            ("pastoral", "over_capacity_amount"),
            ("history", "extra_volume_divisor"),
        ],
    )
    def test_fields_unused_by_genre_are_rejected(self, genre, field):
        with pytest.raises(ValidationError, match=f"{genre} pricing does not use {field}"):
            PricingConfig.model_validate({"genres": {genre: {field: 3}}})

    def test_genre_specific_fields_are_accepted_where_used(self):
        table = PricingConfig.model_validate(
            {
                "genres": {
                    "comedy": {"amount_per_audience": 250, "over_capacity_amount": 5000},
                    "pastoral": {"extra_volume_divisor": 3},
                }
            }
        ).to_table()
        assert table.for_genre(Genre.COMEDY).amount_per_audience == 250
        assert table.for_genre(Genre.PASTORAL).extra_volume_divisor == 3

    def test_zero_divisor_is_rejected(self):
        with pytest.raises(ValidationError):
            PricingConfig.model_validate({"genres": {"comedy": {"extra_volume_divisor": 0}}})


class TestPricingTable:
    def test_incomplete_table_is_rejected(self):
        with pytest.raises(ValueError):
            PricingTable(rates={Genre.TRAGEDY: DEFAULT_PRICING.for_genre(Genre.TRAGEDY)})

    def test_rates_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_PRICING.rates[Genre.TRAGEDY] = None


class TestSettings:
    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.plays_file is None
        assert settings.log_level == "INFO"
        assert settings.load_pricing() is DEFAULT_PRICING

    def test_reads_environment(self, tmp_path):
        pricing_path = tmp_path / "pricing.json"
        pricing_path.write_text(
            json.dumps({"genres": {"history": {"over_capacity_per_person": 1500}}}),
            encoding="utf-8",
        )
        settings = Settings.from_env(
            {"THEATER_PRICING_FILE": str(pricing_path), "THEATER_LOG_LEVEL": "debug"}
        )

        assert settings.log_level == "DEBUG"
        assert settings.load_pricing().for_genre(Genre.HISTORY).over_capacity_per_person == 1500

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings.from_env({"THEATER_LOG_LEVEL": "chatty"})
