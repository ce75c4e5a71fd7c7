"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from payoffplanner import create_app
from payoffplanner.config import BaseConfig, DevConfig, TestConfig


def test_defaults_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("PAYOFFPLANNER_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("PAYOFFPLANNER_DATABASE_URL", raising=False)
    monkeypatch.setenv("PAYOFFPLANNER_DEFAULT_EXTRA_PAYMENT", "75.5")

    config = BaseConfig()

    assert config.DATA_DIR == (tmp_path / "data").resolve()
    assert config.DATA_DIR.exists()
    assert config.DATABASE_URL.endswith("payoffplanner.db")
    assert config.DEFAULT_EXTRA_PAYMENT == 75.5
    assert config.MAX_SIMULATION_MONTHS == 600


def test_malformed_extra_payment_falls_back(tmp_path, monkeypatch):
    monkeypatch.setenv("PAYOFFPLANNER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("PAYOFFPLANNER_DEFAULT_EXTRA_PAYMENT", "lots")

    assert BaseConfig().DEFAULT_EXTRA_PAYMENT == 0.0


def test_non_dev_mode_requires_secret(tmp_path, monkeypatch):
    monkeypatch.setenv("PAYOFFPLANNER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("PAYOFFPLANNER_DEV_MODE", "false")
    monkeypatch.delenv("PAYOFFPLANNER_SECRET_KEY", raising=False)

    with pytest.raises(ValueError, match="SECRET_KEY"):
        BaseConfig()


def test_test_config_uses_memory_database(tmp_path, monkeypatch):
    monkeypatch.setenv("PAYOFFPLANNER_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("PAYOFFPLANNER_TEST_DATABASE_URL", raising=False)

    config = TestConfig()

    assert config.TESTING is True
    assert config.DATABASE_URL == "sqlite://"
    assert "poolclass" in config.sqlalchemy_engine_options()


def test_create_app_by_name(tmp_path, monkeypatch):
    monkeypatch.setenv("PAYOFFPLANNER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("PAYOFFPLANNER_TEST_DATABASE_URL", "sqlite://")

    app = create_app("testing")

    assert isinstance(app.config["PAYOFFPLANNER_CONFIG"], TestConfig)
    assert {"auth", "debts", "strategy"} <= set(app.blueprints)


def test_dev_config_flags(tmp_path, monkeypatch):
    monkeypatch.setenv("PAYOFFPLANNER_DATA_DIR", str(tmp_path))
    assert DevConfig.DEBUG is True
    assert DevConfig().TESTING is False
