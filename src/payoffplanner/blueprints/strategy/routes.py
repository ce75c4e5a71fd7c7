"""Payoff comparison and chart routes."""

from __future__ import annotations

from flask import Response, jsonify, request

from ...extensions import get_debt_repository, get_settings_repository
from ...services import charts
from ...services.payoff import STRATEGIES
from ...services.planner import PayoffPlan, build_plan, plan_to_dict, strategy_to_dict
from ..common import current_user_id, json_error, login_required
from . import bp


def _load_plan() -> PayoffPlan:
    return build_plan(
        user_id=current_user_id(),
        debt_repo=get_debt_repository(),
        settings_repo=get_settings_repository(),
    )


@bp.get("/")
@login_required
def compare():
    """Both strategies, totals and the savings recommendation."""

    return jsonify(plan_to_dict(_load_plan()))


@bp.get("/chart.png")
@login_required
def chart():
    """PNG of remaining balance over time.

    ``?method=snowball`` or ``?method=avalanche`` renders that strategy's
    per-debt timeline; without it both totals are compared.
    """

    method = request.args.get("method")
    if method is not None and method not in STRATEGIES:
        return json_error("unknown_strategy", f"Unknown strategy {method!r}.", 404)

    comparison = _load_plan().comparison
    if method is None:
        figure = charts.comparison_chart(comparison)
    else:
        figure = charts.balance_timeline_chart(getattr(comparison, method))
    return Response(charts.figure_to_png(figure), mimetype="image/png")


@bp.get("/<method>")
@login_required
def strategy_detail(method: str):
    """Month-by-month schedule for one strategy.

    ``?search=`` keeps only ledger rows whose debt name contains the term.
    """

    if method not in STRATEGIES:
        return json_error("unknown_strategy", f"Unknown strategy {method!r}.", 404)
    comparison = _load_plan().comparison
    search = request.args.get("search", "").strip() or None
    return jsonify(
        strategy_to_dict(getattr(comparison, method), comparison.debts, search=search)
    )
