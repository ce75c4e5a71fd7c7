"""Tests for the Flask CLI commands."""

from __future__ import annotations

import json


def test_simulate_from_json_file(app, tmp_path):
    debts_file = tmp_path / "debts.json"
    debts_file.write_text(
        json.dumps(
            [
                {"name": "Small", "balance": 300, "minimum_payment": 50, "apr": 5},
                {"name": "Big", "balance": 5000, "minimum_payment": 50, "apr": 25},
            ]
        )
    )

    result = app.test_cli_runner().invoke(
        args=["payoffplanner-simulate", str(debts_file), "--extra", "100"]
    )

    assert result.exit_code == 0, result.output
    assert "Snowball" in result.output
    assert "Avalanche" in result.output
    assert "order: Small, Big" in result.output
    assert "order: Big, Small" in result.output
    assert "Saves $" in result.output


def test_simulate_reports_invalid_debt(app, tmp_path):
    debts_file = tmp_path / "debts.json"
    debts_file.write_text(json.dumps([{"name": "Bad", "balance": 100, "minimum_payment": 10, "apr": 120}]))

    result = app.test_cli_runner().invoke(args=["payoffplanner-simulate", str(debts_file)])

    assert result.exit_code != 0
    assert "Invalid APR for Bad" in result.output


def test_simulate_reports_malformed_file(app, tmp_path):
    debts_file = tmp_path / "debts.json"
    debts_file.write_text("[{\"name\": \"Missing fields\"}]")

    result = app.test_cli_runner().invoke(args=["payoffplanner-simulate", str(debts_file)])

    assert result.exit_code != 0
    assert "Could not read debts" in result.output


def test_plan_for_stored_user(app):
    client = app.test_client()
    client.post("/auth/register", json={"username": "cli-user", "password": "long-enough"})
    client.post("/debts/", json={"name": "Card", "balance": 1200, "minimum_payment": 100, "apr": 12})

    result = app.test_cli_runner().invoke(args=["payoffplanner-plan", "--username", "cli-user"])

    assert result.exit_code == 0, result.output
    assert "1 year, 1 month" in result.output
    assert "order: Card" in result.output


def test_plan_unknown_user(app):
    result = app.test_cli_runner().invoke(args=["payoffplanner-plan", "--username", "ghost"])

    assert result.exit_code != 0
    assert "No such user" in result.output


def test_reset_password_then_login(app):
    client = app.test_client()
    client.post("/auth/register", json={"username": "forgetful", "password": "old-password"})
    client.post("/auth/logout")

    result = app.test_cli_runner().invoke(
        args=["payoffplanner-reset-password", "--username", "forgetful", "--password", "new-password"]
    )

    assert result.exit_code == 0, result.output
    assert "Password updated for forgetful" in result.output
    assert client.post("/auth/login", json={"username": "forgetful", "password": "old-password"}).status_code == 401
    assert client.post("/auth/login", json={"username": "forgetful", "password": "new-password"}).status_code == 200


def test_reset_password_rejects_short_password(app):
    app.test_client().post("/auth/register", json={"username": "forgetful", "password": "old-password"})

    result = app.test_cli_runner().invoke(
        args=["payoffplanner-reset-password", "--username", "forgetful", "--password", "short"]
    )

    assert result.exit_code != 0
    assert "at least 8 characters" in result.output


def test_reset_password_unknown_user(app):
    result = app.test_cli_runner().invoke(
        args=["payoffplanner-reset-password", "--username", "ghost", "--password", "whatever-123"]
    )

    assert result.exit_code != 0
    assert "No such user" in result.output
