"""Shared fixtures: in-memory history store and an API client wired to it."""

import os

# Must be set before config.settings is imported anywhere
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from engine.mortgage_engine import MortgageEngine
from storage.calculation_history import CalculationHistory
from storage.database import build_engine, build_session_factory, init_db


@pytest.fixture
def db_engine():
    engine = build_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def history(db_engine):
    return CalculationHistory(build_session_factory(db_engine))


@pytest.fixture
def mortgage_engine(history):
    return MortgageEngine(history=history)


@pytest.fixture
def client(monkeypatch, mortgage_engine):
    from api import main as api_main

    monkeypatch.setattr(api_main, "engine", mortgage_engine)
    with TestClient(api_main.app) as test_client:
        yield test_client
