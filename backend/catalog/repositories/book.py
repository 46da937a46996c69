"""
Repository para operações de Book no banco de dados.

As consultas fazem LEFT JOIN com author e cada linha é decodificada por
posição de coluna em Book + Author.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from sqlalchemy import Row, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.exceptions import QueryError
from catalog.core.logging import get_logger
from catalog.models.book import Book
from catalog.repositories.author import decode_author
from catalog.repositories.base import BaseRepository

logger = get_logger(__name__)

_SELECT_BOOKS_WITH_AUTHOR = (
    "SELECT b.id, b.title, b.release_year, b.summary, b.price, b.cover, "
    "a.id, a.firstname, a.lastname, a.birthday "
    "FROM book b "
    "LEFT JOIN author a ON b.author_id = a.id"
)

SELECT_BOOKS = text(_SELECT_BOOKS_WITH_AUTHOR)

SELECT_BOOK_BY_ID = text(_SELECT_BOOKS_WITH_AUTHOR + " WHERE b.id = :id")

INSERT_BOOK = text(
    "INSERT INTO book (title, release_year, summary, price, author_id) "
    "VALUES (:title, :release_year, :summary, :price, :author_id) "
    "RETURNING id"
)

UPDATE_BOOK = text(
    "UPDATE book SET title = :title, release_year = :release_year, "
    "summary = :summary, price = :price, author_id = :author_id "
    "WHERE id = :id"
)

DELETE_BOOK = text("DELETE FROM book WHERE id = :id")

# Posição da coluna a.id nas consultas com JOIN
_AUTHOR_OFFSET = 6


def to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def decode_book(row: Row | tuple) -> Book:
    """
    Decodifica uma linha do JOIN book/author.

    cover NULL vira None; autor sem par no LEFT JOIN (a.id NULL) vira None.
    """
    try:
        cover = row[5]
        author = None
        if row[_AUTHOR_OFFSET] is not None:
            author = decode_author(row, offset=_AUTHOR_OFFSET)

        return Book(
            id=int(row[0]),
            title=row[1],
            release_year=int(row[2]),
            summary=row[3],
            price=to_decimal(row[4]),
            cover=str(cover) if cover is not None else None,
            author_id=author.id if author is not None else None,
            author=author,
        )
    except (IndexError, TypeError, ValueError, InvalidOperation) as exc:
        raise QueryError("Linha de livro inválida") from exc


def _write_params(book: Book) -> dict[str, Any]:
    # Ordem dos parâmetros = ordem dos campos do BookDto
    return {
        "title": book.title,
        "release_year": book.release_year,
        "summary": book.summary,
        "price": book.price,
        "author_id": book.author_id,
    }


class BookRepository(BaseRepository):
    """Repository para operações CRUD de Book."""

    def __init__(self, db: AsyncSession):
        super().__init__(db)

    async def list_with_author(self) -> list[Book]:
        """Lista todos os livros com autor, na ordem retornada pelo banco."""
        rows = await self.fetch_all(SELECT_BOOKS)
        return [decode_book(row) for row in rows]

    async def get_with_author(self, book_id: int) -> Book | None:
        """Busca livro com dados do autor."""
        row = await self.fetch_one(SELECT_BOOK_BY_ID, {"id": book_id})
        if row is None:
            return None
        return decode_book(row)

    async def insert(self, book: Book) -> int:
        """
        Insere o livro e retorna o ID gerado pelo banco.

        Raises:
            QueryError: Falha na escrita ou RETURNING sem linha
        """
        async with self.transaction():
            result = await self.execute(INSERT_BOOK, _write_params(book))
            try:
                new_id = result.scalar_one()
            except SQLAlchemyError as exc:
                logger.error(f"INSERT sem id retornado: {exc}")
                raise QueryError("Banco não retornou o ID do livro criado") from exc
        return int(new_id)

    async def update(self, book_id: int, book: Book) -> int:
        """Atualiza o livro e retorna o número de linhas afetadas."""
        params = _write_params(book)
        params["id"] = book_id
        async with self.transaction():
            result = await self.execute(UPDATE_BOOK, params)
        return result.rowcount

    async def delete(self, book_id: int) -> int:
        """Remove o livro e retorna o número de linhas afetadas."""
        async with self.transaction():
            result = await self.execute(DELETE_BOOK, {"id": book_id})
        return result.rowcount
