"""
Script de seed para criar tabelas e dados iniciais no banco.

Uso:
    python -m catalog.db.seed

Cria as tabelas author e book (se não existirem) e insere autores e
livros de exemplo. Pode ser executado mais de uma vez.
"""

import asyncio
import logging
from decimal import Decimal

from sqlalchemy import select

from catalog.db.session import Base, async_session_factory, engine
from catalog.models import Author, Book

logger = logging.getLogger(__name__)

SAMPLE_AUTHORS = [
    {"firstname": "Mark", "lastname": "Twain", "birthday": "1835-11-30"},
    {"firstname": "Charles", "lastname": "Perrault", "birthday": "1628-01-12"},
]

SAMPLE_BOOKS = [
    {
        "title": "Tom Sawyer",
        "release_year": 1876,
        "summary": "An adventure book",
        "price": Decimal("12.20"),
        "cover": "cover1.jpg",
        "author": "Twain",
    },
    {
        "title": "The Red Hat",
        "release_year": 1697,
        "summary": "A fairy tale book",
        "price": Decimal("14.20"),
        "cover": None,
        "author": "Perrault",
    },
]


async def create_tables() -> None:
    """Cria as tabelas a partir dos models."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tabelas verificadas")


async def create_samples() -> None:
    """Insere autores e livros de exemplo que ainda não existem."""
    async with async_session_factory() as db:
        authors: dict[str, Author] = {}
        for data in SAMPLE_AUTHORS:
            result = await db.execute(
                select(Author).where(Author.lastname == data["lastname"])
            )
            author = result.scalar_one_or_none()
            if author is None:
                author = Author(**data)
                db.add(author)
                await db.flush()
                logger.info(f"Autor criado: {author.firstname} {author.lastname} (ID: {author.id})")
            authors[author.lastname] = author

        for data in SAMPLE_BOOKS:
            result = await db.execute(
                select(Book).where(Book.title == data["title"])
            )
            if result.scalar_one_or_none():
                logger.info(f"Livro já existe: {data['title']}")
                continue

            fields = {k: v for k, v in data.items() if k != "author"}
            book = Book(**fields, author_id=authors[data["author"]].id)
            db.add(book)
            logger.info(f"Livro criado: {book.title}")

        await db.commit()


async def main() -> None:
    """Executa todos os seeds."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    logger.info("Executando seeds...")
    await create_tables()
    await create_samples()
    await engine.dispose()
    logger.info("Seeds concluídos!")


if __name__ == "__main__":
    asyncio.run(main())
