"""Shared test fixtures.

  use_test_engine: redirects the engine + UoW modules to a temp-file SQLite DB.
  session: a plain session on that engine, for repository tests.
  predictor: fake age/gender/nationality provider recording its calls.
  client: FastAPI TestClient wired to the test engine and fake provider.
"""
import os
from types import SimpleNamespace

import pytest
from sqlmodel import Session, SQLModel, create_engine


def pytest_configure(config):
    """Keep the import-time engine in memory so collection never touches data/."""
    os.environ.setdefault("DATABASE_URL", "sqlite://")


class FakePredictor:
    """Answers every prediction from ``results``; exception values are raised."""

    def __init__(self, age=30, gender="male", nationality="US"):
        self.results = {"age": age, "gender": gender, "nationality": nationality}
        self.calls: list[tuple[str, str]] = []

    def age(self, name):
        return self._answer("age", name)

    def gender(self, name):
        return self._answer("gender", name)

    def nationality(self, name):
        return self._answer("nationality", name)

    def _answer(self, kind, name):
        self.calls.append((kind, name))
        value = self.results[kind]
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def use_test_engine(tmp_path, monkeypatch):
    """Monkeypatch infra/db engine references to an isolated temp-file SQLite DB."""
    db_path = tmp_path / "test_people.db"
    test_engine = create_engine(
        f"sqlite:///{db_path}", echo=False, connect_args={"check_same_thread": False},
    )

    import personinfo.models  # noqa: F401  register all ORM mappers
    SQLModel.metadata.create_all(test_engine)

    monkeypatch.setattr("personinfo.infra.db.engine.engine", test_engine)
    monkeypatch.setattr("personinfo.infra.db.uow.engine", test_engine)

    yield test_engine

    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def session(use_test_engine):
    with Session(use_test_engine) as s:
        yield s


@pytest.fixture
def predictor():
    return FakePredictor()


@pytest.fixture
def client(use_test_engine, predictor):
    """FastAPI TestClient backed by the isolated test engine and a fake provider."""
    from fastapi.testclient import TestClient
    from personinfo.api.app import create_app
    from personinfo.api.deps import get_predictors

    app = create_app()
    app.dependency_overrides[get_predictors] = lambda: SimpleNamespace(
        age=predictor, gender=predictor, nationality=predictor,
    )
    with TestClient(app) as c:
        yield c
