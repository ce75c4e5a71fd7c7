"""Debt CRUD and extra payment routes."""

from __future__ import annotations

from flask import jsonify, request

from ...extensions import get_debt_repository, get_settings_repository
from ...logging_config import get_logger
from ...models.debt import Debt
from ..common import current_user_id, json_error, login_required
from . import bp
from .forms import DebtForm, ExtraPaymentForm

logger = get_logger(__name__)


def _payload() -> dict:
    return request.get_json(silent=True) or request.form.to_dict()


def _validation_error(errors: dict):
    return json_error("validation_failed", "Please correct the highlighted fields.", 400, fields=errors)


@bp.get("/")
@login_required
def list_debts():
    debts = get_debt_repository().list_all(user_id=current_user_id())
    return jsonify([debt.to_dict() for debt in debts])


@bp.post("/")
@login_required
def create_debt():
    """Validate a debt payload and persist it."""

    form = DebtForm.from_mapping(_payload())
    if not form.validate():
        return _validation_error(form.errors)

    user_id = current_user_id()
    debt = get_debt_repository().create(Debt(user_id=user_id, **form.cleaned()), user_id=user_id)
    logger.info("Debt created", extra={"user_id": user_id, "debt_id": debt.id})
    return jsonify(debt.to_dict()), 201


@bp.get("/<int:debt_id>")
@login_required
def get_debt(debt_id: int):
    debt = get_debt_repository().get_by_id(debt_id, user_id=current_user_id())
    if debt is None:
        return json_error("debt_not_found", f"Debt #{debt_id} does not exist.", 404)
    return jsonify(debt.to_dict())


@bp.put("/<int:debt_id>")
@login_required
def update_debt(debt_id: int):
    user_id = current_user_id()
    repo = get_debt_repository()
    debt = repo.get_by_id(debt_id, user_id=user_id)
    if debt is None:
        return json_error("debt_not_found", f"Debt #{debt_id} does not exist.", 404)

    form = DebtForm.from_mapping(_payload())
    if not form.validate():
        return _validation_error(form.errors)

    for key, value in form.cleaned().items():
        setattr(debt, key, value)
    debt = repo.update(debt, user_id=user_id)
    logger.info("Debt updated", extra={"user_id": user_id, "debt_id": debt_id})
    return jsonify(debt.to_dict())


@bp.delete("/<int:debt_id>")
@login_required
def delete_debt(debt_id: int):
    user_id = current_user_id()
    if not get_debt_repository().delete(debt_id, user_id=user_id):
        return json_error("debt_not_found", f"Debt #{debt_id} does not exist.", 404)
    logger.info("Debt deleted", extra={"user_id": user_id, "debt_id": debt_id})
    return "", 204


@bp.get("/settings")
@login_required
def get_settings():
    extra = get_settings_repository().get_extra_payment(user_id=current_user_id())
    return jsonify({"extra_payment": extra})


@bp.put("/settings")
@login_required
def update_settings():
    """Store the monthly extra payment."""

    form = ExtraPaymentForm(extra_payment=_payload().get("extra_payment"))
    if not form.validate():
        return _validation_error(form.errors)

    extra = get_settings_repository().set_extra_payment(
        float(form.extra_payment), user_id=current_user_id()
    )
    return jsonify({"extra_payment": extra})
