"""
Service para lógica de negócio de Book.
"""

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.exceptions import (
    AuthorNotFoundError,
    NotFoundError,
    ValidationError,
    errors_to_details,
)
from catalog.core.logging import get_logger
from catalog.mapper.book import (
    map_to_book_entity,
    map_to_book_response,
    map_to_book_simple,
)
from catalog.models.author import Author
from catalog.repositories.book import BookRepository
from catalog.schemas.base import ErrorDetail
from catalog.schemas.book import BookDto, BookResponse, BookSimple
from catalog.services.author import AuthorService

logger = get_logger(__name__)


class BookService:
    """Service para operações de Book."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = BookRepository(db)
        self.author_service = AuthorService(db)

    async def list_books(self) -> list[BookResponse]:
        """
        Lista todos os livros com autor, na ordem retornada pelo banco.

        Raises:
            QueryError: Falha no banco (nenhum resultado parcial é retornado)
        """
        books = await self.repo.list_with_author()
        return [map_to_book_response(b) for b in books]

    async def list_simple(self) -> list[BookSimple]:
        """Lista todos os livros na projeção simples, sem autor."""
        books = await self.repo.list_with_author()
        return [map_to_book_simple(b) for b in books]

    async def find(self, book_id: int) -> BookResponse:
        """
        Busca livro por ID.

        Raises:
            NotFoundError: Livro não encontrado
            QueryError: Falha no banco
        """
        book = await self.repo.get_with_author(book_id)
        if book is None:
            logger.warning(f"Livro {book_id} não encontrado")
            raise NotFoundError("Livro não encontrado")
        return map_to_book_response(book)

    async def create(self, data: BookDto) -> int:
        """
        Cria livro e retorna o ID gerado.

        Nenhuma escrita acontece se os dados forem inválidos ou o autor
        não existir.

        Raises:
            ValidationError: Campos malformados ou fora do intervalo
            AuthorNotFoundError: author_id não existe
            QueryError: Falha no banco
        """
        data = self._validate(data)
        author = await self._resolve_author(data.author_id)

        book = map_to_book_entity(data, author)
        book_id = await self.repo.insert(book)

        logger.info(f"Livro criado: {book_id} ({data.title})")
        return book_id

    async def update(self, book_id: int, data: BookDto) -> None:
        """
        Atualiza livro.

        Raises:
            ValidationError: Campos malformados ou fora do intervalo
            AuthorNotFoundError: author_id não existe
            NotFoundError: Livro não encontrado
            QueryError: Falha no banco
        """
        data = self._validate(data)
        author = await self._resolve_author(data.author_id)

        book = map_to_book_entity(data, author)
        affected = await self.repo.update(book_id, book)
        if affected == 0:
            logger.warning(f"Livro {book_id} não encontrado para atualização")
            raise NotFoundError("Livro não encontrado")

        logger.info(f"Livro atualizado: {book_id}")

    async def delete(self, book_id: int) -> None:
        """
        Remove livro.

        Raises:
            NotFoundError: Livro não encontrado
            QueryError: Falha no banco
        """
        affected = await self.repo.delete(book_id)
        if affected == 0:
            logger.warning(f"Livro {book_id} não encontrado para remoção")
            raise NotFoundError("Livro não encontrado")

        logger.info(f"Livro removido: {book_id}")

    async def _resolve_author(self, author_id: int) -> Author:
        try:
            return await self.author_service.get_by_id(author_id)
        except NotFoundError as exc:
            raise AuthorNotFoundError(
                "Autor não encontrado",
                details=[ErrorDetail(field="author_id", message=f"Autor {author_id} não existe")],
            ) from exc

    @staticmethod
    def _validate(data: BookDto) -> BookDto:
        """
        Revalida o DTO pelas regras declaradas em BookDto.

        Cobre DTOs montados sem validação (ex.: model_construct).

        Raises:
            ValidationError: Campos malformados ou fora do intervalo
        """
        try:
            return BookDto.model_validate(data.model_dump())
        except PydanticValidationError as exc:
            raise ValidationError(
                "Dados do livro inválidos",
                details=errors_to_details(exc.errors()),
            ) from exc
