"""
Fixtures compartilhadas para testes.

O banco é substituído por um AsyncMock de AsyncSession: cada chamada a
execute() devolve um Result falso montado com make_result.
"""

from decimal import Decimal
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient, ASGITransport

from catalog.db.session import get_db
from catalog.main import app
from catalog.models import Author, Book


# ==========================================
# Event loop configuration
# ==========================================

@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


# ==========================================
# Database fixtures
# ==========================================

@pytest.fixture
def mock_db():
    """Mock da sessão do banco."""
    return AsyncMock()


@pytest.fixture
def make_result():
    """
    Fábrica de Result falso.

    Uso:
        mock_db.execute.side_effect = [make_result(rows=[...]), make_result(rowcount=1)]
    """
    def _make(rows=None, rowcount=None, scalar=None):
        rows = list(rows or [])
        result = MagicMock()
        result.all.return_value = rows
        result.first.return_value = rows[0] if rows else None
        result.scalar_one.return_value = scalar
        result.rowcount = len(rows) if rowcount is None else rowcount
        return result

    return _make


@pytest.fixture
def executed_sql():
    """Retorna os statements executados no mock, com espaços normalizados."""
    def _executed(db) -> list[str]:
        return [" ".join(str(c.args[0]).split()) for c in db.execute.await_args_list]

    return _executed


@pytest.fixture
def executed_params():
    """Retorna os parâmetros passados a cada execute() do mock."""
    def _executed(db) -> list[dict]:
        return [c.args[1] for c in db.execute.await_args_list]

    return _executed


# ==========================================
# Sample rows and entities
# ==========================================

@pytest.fixture
def book_rows():
    """Linhas do JOIN book/author na ordem das colunas da consulta."""
    return [
        (1, "Tom Sawyer", 1976, "An adventure book", 12.2, "cover1.jpg",
         1, "Mark", "Twain", "1835-11-30"),
        (2, "The Red Hat", 1986, "A fairy tale book", 14.2, "cover2.jpg",
         2, "Charles", "Perrault", "1628-01-12"),
    ]


@pytest.fixture
def author_row():
    return (1, "Mark", "Twain", "1835-11-30")


@pytest.fixture
def sample_author():
    """Autor de exemplo."""
    return Author(id=1, firstname="Mark", lastname="Twain", birthday="1835-11-30")


@pytest.fixture
def sample_book(sample_author):
    """Livro de exemplo."""
    return Book(
        id=1,
        title="Tom Sawyer",
        release_year=1976,
        summary="An adventure book",
        price=Decimal("12.2"),
        cover="cover1.jpg",
        author_id=sample_author.id,
        author=sample_author,
    )


# ==========================================
# HTTP Client fixtures
# ==========================================

@pytest.fixture
async def client(mock_db) -> AsyncGenerator[AsyncClient, None]:
    """
    Cliente HTTP assíncrono para testes.

    Substitui a dependency get_db pelo mock da sessão.
    """
    async def override_get_db():
        yield mock_db

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
