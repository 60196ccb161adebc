"""Tests for environment driven configuration."""

import logging

from sdc_validator.config import ValidatorConfig


def test_from_env_reads_values(monkeypatch):
    monkeypatch.setenv("SDC_VALIDATOR_CACHE_TTL", "60")
    monkeypatch.setenv("SDC_VALIDATOR_FETCH_TIMEOUT", "2.5")
    monkeypatch.setenv("SDC_VALIDATOR_OFFLINE", "true")
    monkeypatch.setenv("SDC_VALIDATOR_KNOWN_TYPES", "Drupal\\Core\\Url, Drupal\\Core\\Template\\Attribute")

    config = ValidatorConfig.from_env()

    assert config.cache_ttl == 60
    assert config.fetch_timeout == 2.5
    assert config.offline is True
    assert config.known_types == ["Drupal\\Core\\Url", "Drupal\\Core\\Template\\Attribute"]


def test_malformed_numbers_fall_back_to_defaults(monkeypatch, caplog):
    monkeypatch.setenv("SDC_VALIDATOR_CACHE_TTL", "one day")
    monkeypatch.setenv("SDC_VALIDATOR_FETCH_TIMEOUT", "10s")

    with caplog.at_level(logging.WARNING):
        config = ValidatorConfig.from_env()

    assert config.cache_ttl == 24 * 60 * 60
    assert config.fetch_timeout == 10.0
    assert "SDC_VALIDATOR_CACHE_TTL" in caplog.text
    assert "SDC_VALIDATOR_FETCH_TIMEOUT" in caplog.text
