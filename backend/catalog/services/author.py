"""
Service para consulta de Author.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.exceptions import NotFoundError
from catalog.core.logging import get_logger
from catalog.mapper.book import map_to_author_simple
from catalog.models.author import Author
from catalog.repositories.author import AuthorRepository
from catalog.schemas.author import AuthorSimple

logger = get_logger(__name__)


class AuthorService:
    """Service para operações de Author."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = AuthorRepository(db)

    async def get_by_id(self, author_id: int) -> Author:
        """
        Busca autor por ID.

        Raises:
            NotFoundError: Autor não encontrado
            QueryError: Falha no banco
        """
        author = await self.repo.get_by_id(author_id)
        if author is None:
            logger.warning(f"Autor {author_id} não encontrado")
            raise NotFoundError("Autor não encontrado")
        return author

    async def list_authors(self) -> list[AuthorSimple]:
        """Lista todos os autores."""
        authors = await self.repo.list_all()
        return [map_to_author_simple(a) for a in authors]
