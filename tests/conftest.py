"""Pytest configuration and shared fixtures for PayoffPlanner tests.

This module provides database fixtures, test data factories, and helper utilities
for testing the payoff engine, repositories, services and routes without touching
a real application database.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

# Import all models to ensure they're registered with SQLModel metadata
from payoffplanner.config import TestConfig
from payoffplanner.infra.database import create_session_factory
from payoffplanner.infra.repositories import SQLModelDebtRepository, SQLModelSettingsRepository
from payoffplanner.models import Debt, User
from payoffplanner.services.payoff import DebtAccount

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the one repositories receive in production."""

    return create_session_factory(db_engine)


@pytest.fixture
def user(db_engine) -> User:
    """Create a default user for scoping data."""

    with Session(db_engine, expire_on_commit=False) as session:
        u = User(username="tester", password_hash="dummy-hash")
        session.add(u)
        session.commit()
        session.refresh(u)
        return u


@pytest.fixture
def debt_repo(session_factory) -> SQLModelDebtRepository:
    return SQLModelDebtRepository(session_factory)


@pytest.fixture
def settings_repo(session_factory) -> SQLModelSettingsRepository:
    return SQLModelSettingsRepository(session_factory)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def debt_factory(debt_repo, user):
    """Factory for creating persisted debts.

    Returns:
        Callable: Function that creates and persists Debt instances
    """

    def _create_debt(
        name: str = "Test Debt",
        balance: float = 1000.00,
        minimum_payment: float = 25.00,
        apr: float = 18.0,
        owner: User | None = None,
    ) -> Debt:
        """Create a debt with sensible defaults.

        Args:
            name: Creditor or account name
            balance: Current outstanding balance
            minimum_payment: Minimum monthly payment
            apr: Annual percentage rate (e.g., 18.0 for 18%)

        Returns:
            Debt: Persisted debt instance
        """
        owner = owner or user
        debt = Debt(
            user_id=owner.id,
            name=name,
            balance=balance,
            minimum_payment=minimum_payment,
            apr=apr,
        )
        return debt_repo.create(debt, user_id=owner.id)

    return _create_debt


def make_debt(
    debt_id: str = "1",
    name: str | None = None,
    *,
    balance: float = 1000.0,
    minimum_payment: float = 50.0,
    apr: float = 12.0,
) -> DebtAccount:
    """Build an engine input without touching the database."""

    return DebtAccount(
        id=debt_id,
        name=name if name is not None else f"Debt {debt_id}",
        balance=balance,
        minimum_payment=minimum_payment,
        apr=apr,
    )


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture
def app(tmp_path, monkeypatch):
    """Application configured against an in-memory database."""

    from payoffplanner import create_app

    monkeypatch.setenv("PAYOFFPLANNER_DATA_DIR", str(tmp_path))
    config = TestConfig()
    config.SECRET_KEY = "test-secret"
    application = create_app(config=config)
    application.config.update(TESTING=True)
    yield application


@pytest.fixture
def client(app):
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def auth_client(client):
    """Client with a registered, logged-in user."""

    response = client.post(
        "/auth/register", json={"username": "planner", "password": "correct-horse"}
    )
    assert response.status_code == 201
    return client


# =============================================================================
# Helper Utilities
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference (default 0.01 = 1 cent)

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
