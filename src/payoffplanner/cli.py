"""Flask CLI commands for PayoffPlanner."""

from __future__ import annotations

import json

import click


def _echo_strategy(strategy) -> None:
    from .services.formatters import format_currency, format_duration

    status = "" if strategy.converged else " (not paid off within the simulation window)"
    click.echo(
        f"{strategy.method.title():<10} {format_duration(strategy.months_to_payoff):<22} "
        f"interest {format_currency(strategy.total_interest_paid)}{status}"
    )
    order = ", ".join(summary.debt_name for summary in strategy.debt_payments)
    if order:
        click.echo(f"{'':<10} order: {order}")


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("payoffplanner-simulate")
    @click.argument("debts_file", type=click.File("r"))
    @click.option("--extra", type=click.FloatRange(min=0), default=0.0, show_default=True,
                  help="Extra monthly payment beyond all minimums")
    def payoffplanner_simulate(debts_file, extra: float) -> None:
        """Simulate both strategies for a JSON list of debts."""

        from .services.payoff import DebtAccount, InvalidDebtError, compare_strategies
        from .services.planner import compare_savings

        try:
            raw = json.load(debts_file)
            debts = [
                DebtAccount(
                    id=str(item.get("id") or index + 1),
                    name=str(item.get("name", "")),
                    balance=float(item["balance"]),
                    minimum_payment=float(item["minimum_payment"]),
                    apr=float(item["apr"]),
                )
                for index, item in enumerate(raw)
            ]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as exc:
            raise click.ClickException(f"Could not read debts: {exc}") from exc

        try:
            comparison = compare_strategies(debts, extra)
        except InvalidDebtError as exc:
            raise click.ClickException(str(exc)) from exc

        _echo_strategy(comparison.snowball)
        _echo_strategy(comparison.avalanche)
        click.echo(compare_savings(comparison).message)

    @app.cli.command("payoffplanner-plan")
    @click.option("--username", required=True, help="User whose stored debts to simulate")
    def payoffplanner_plan(username: str) -> None:
        """Simulate both strategies for a stored user's debts."""

        from .extensions import get_debt_repository, get_session_factory, get_settings_repository
        from .services.auth import get_user_by_username
        from .services.planner import build_plan

        user = get_user_by_username(username, get_session_factory())
        if user is None:
            raise click.ClickException(f"No such user: {username}")

        plan = build_plan(
            user_id=user.id,
            debt_repo=get_debt_repository(),
            settings_repo=get_settings_repository(),
        )
        _echo_strategy(plan.comparison.snowball)
        _echo_strategy(plan.comparison.avalanche)
        click.echo(plan.savings.message)

    @app.cli.command("payoffplanner-reset-password")
    @click.option("--username", required=True, help="Account to update")
    @click.password_option(help="New password (prompted when omitted)")
    def payoffplanner_reset_password(username: str, password: str) -> None:
        """Set a new password for an existing user."""

        from .extensions import get_session_factory
        from .services.auth import get_user_by_username, reset_password

        session_factory = get_session_factory()
        user = get_user_by_username(username, session_factory)
        if user is None:
            raise click.ClickException(f"No such user: {username}")

        try:
            reset_password(user_id=user.id, password=password, session_factory=session_factory)
        except ValueError as exc:
            raise click.ClickException(str(exc)) from exc
        click.echo(f"Password updated for {username}")
