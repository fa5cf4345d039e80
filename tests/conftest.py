# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
"""
pytest fixtures: aplicação apontando para um SQLite temporário.
"""
import sqlite3
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool

from banco_questoes.core.config import Settings
from banco_questoes.db.database import Database
from banco_questoes.main import create_app

SCHEMA = """
CREATE TABLE questoes (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    enunciado TEXT NOT NULL,
    disciplina TEXT NOT NULL,
    tema TEXT NOT NULL,
    nivel TEXT NOT NULL
);
CREATE TABLE usuarios (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    nome TEXT NOT NULL,
    email TEXT NOT NULL,
    senha TEXT NOT NULL
);
"""


class BancoQuebrado:
    """Gateway que falha em toda consulta (simula banco fora do ar)."""

    def __init__(self):
        self.chamadas = []

    async def execute(self, sql, params=None):
        self.chamadas.append((sql, params))
        raise RuntimeError("connection refused")

    async def ping(self):
        return "connection refused"


@pytest.fixture
def db_url(tmp_path) -> str:
    path = tmp_path / "banco.db"
    with sqlite3.connect(path) as conn:
        conn.executescript(SCHEMA)
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def settings(db_url) -> Settings:
    return Settings(DATABASE_URL=db_url, APP_NAME="API para questões e usuários", APP_AUTHOR="Equipe de testes")


@pytest.fixture
def client(settings, db_url):
    app = create_app(settings, database=Database(db_url, poolclass=NullPool))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def banco_quebrado() -> BancoQuebrado:
    return BancoQuebrado()


@pytest.fixture
def client_quebrado(banco_quebrado):
    app = create_app(Settings(DATABASE_URL=""), database=banco_quebrado)
    with TestClient(app) as c:
        yield c
