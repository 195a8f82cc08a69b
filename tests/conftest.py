"""Shared fixtures: every test gets its own seeded store and an app built around it."""
import pytest
from fastapi.testclient import TestClient

from main import create_app
from services.expense_store import ExpenseStore


@pytest.fixture
def store():
    return ExpenseStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(store=store, api_prefix="")) as test_client:
        yield test_client


@pytest.fixture
def taxi():
    return {"amount": 25, "description": "Taxi", "category": "Transport", "date": "2024-01-01"}
