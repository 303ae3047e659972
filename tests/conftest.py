"""Shared fixtures: environment, service fakes, SQLite database and API clients."""

import os

# Settings are read at import time and both values are mandatory.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from minimal_api.api import dependencies
from minimal_api.core import security
from minimal_api.db.session import create_tables, get_db
from minimal_api.main import app
from minimal_api.models import Perfil

from tests.fakes import FakeAdministradorService, FakeVeiculoService


@pytest.fixture
def veiculos():
    return FakeVeiculoService()


@pytest.fixture
def administradores():
    return FakeAdministradorService()


@pytest.fixture
def client(veiculos, administradores):
    """API client whose routes run against the in-memory fakes."""
    app.dependency_overrides[dependencies.get_veiculo_service] = lambda: veiculos
    app.dependency_overrides[dependencies.get_administrador_service] = lambda: administradores
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    token = security.create_access_token(email="adm@teste.com", perfil=Perfil.admin.value)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = security.create_access_token(email="user@teste.com", perfil=Perfil.user.value)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def db_client(session_factory):
    """API client wired to the real services on an in-memory SQLite database."""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
