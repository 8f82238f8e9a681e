# tests/conftest.py
import os

# Debe definirse antes de importar la app: config.database lee DATABASE_URL al importarse
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "secreto-de-pruebas"
os.environ["APP_ENV"] = "development"
os.environ["APP_TIMEZONE"] = "America/Argentina/Buenos_Aires"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

import models  # noqa: E402,F401
from config.database import Base, SessionLocal, engine  # noqa: E402
from main import app  # noqa: E402


@pytest.fixture(autouse=True)
def _tablas():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def grupo(client):
    r = client.post("/api/grupos-musculares", json={"nombre": "Pecho"})
    assert r.status_code == 201
    return r.json()


@pytest.fixture
def ejercicio(client, grupo):
    r = client.post(
        "/api/ejercicios",
        json={"nombre": "Press banca", "grupoMuscularId": grupo["id_grupo_muscular"]},
    )
    assert r.status_code == 201
    return r.json()


@pytest.fixture
def rutina(client):
    r = client.post(
        "/api/rutinas",
        json={"fecha": "2024-03-15", "genero": "hombre", "descripcion": "Empuje"},
    )
    assert r.status_code == 201
    return r.json()


@pytest.fixture
def crear_ejercicio(client, grupo):
    def _crear(nombre):
        r = client.post(
            "/api/ejercicios",
            json={"nombre": nombre, "grupoMuscularId": grupo["id_grupo_muscular"]},
        )
        assert r.status_code == 201
        return r.json()

    return _crear


@pytest.fixture
def usuario(client):
    r = client.post("/api/usuarios", json={"nombre": "ana", "password": "clave123"})
    assert r.status_code == 201
    return r.json()
