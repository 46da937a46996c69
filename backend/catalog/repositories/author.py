"""
Repository para leitura de Author no banco de dados.
"""

from datetime import date, datetime
from typing import Any

from sqlalchemy import Row, text
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.exceptions import QueryError
from catalog.models.author import Author
from catalog.repositories.base import BaseRepository

SELECT_AUTHOR_BY_ID = text(
    "SELECT id, firstname, lastname, birthday FROM author WHERE id = :id"
)

SELECT_AUTHORS = text(
    "SELECT id, firstname, lastname, birthday FROM author ORDER BY id"
)


def to_iso_date(value: Any) -> str:
    """Normaliza birthday para texto ISO (YYYY-MM-DD)."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def decode_author(row: Row | tuple, offset: int = 0) -> Author:
    """
    Decodifica as colunas (id, firstname, lastname, birthday) de uma linha.

    Args:
        row: Linha retornada pelo banco
        offset: Posição da coluna id do autor dentro da linha
    """
    try:
        return Author(
            id=int(row[offset]),
            firstname=row[offset + 1],
            lastname=row[offset + 2],
            birthday=to_iso_date(row[offset + 3]),
        )
    except (IndexError, TypeError, ValueError) as exc:
        raise QueryError("Linha de autor inválida") from exc


class AuthorRepository(BaseRepository):
    """Repository de leitura de Author."""

    def __init__(self, db: AsyncSession):
        super().__init__(db)

    async def get_by_id(self, author_id: int) -> Author | None:
        """Busca autor por ID."""
        row = await self.fetch_one(SELECT_AUTHOR_BY_ID, {"id": author_id})
        if row is None:
            return None
        return decode_author(row)

    async def list_all(self) -> list[Author]:
        """Lista todos os autores ordenados por ID."""
        rows = await self.fetch_all(SELECT_AUTHORS)
        return [decode_author(row) for row in rows]
