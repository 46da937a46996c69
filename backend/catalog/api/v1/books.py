"""
Endpoints de Livros.

Contratos:
    - GET /books: Lista livros com autor
    - GET /books/simple: Lista livros na projeção simples
    - GET /books/{id}: Detalhes do livro com autor
    - POST /books: Cria livro
    - PUT /books/{id}: Atualiza livro
    - DELETE /books/{id}: Remove livro

Status codes:
    - 200: Sucesso
    - 201: Criado com sucesso
    - 400: Campos, corpo ou parâmetros inválidos
    - 404: Livro não encontrado
    - 422: Autor não encontrado
    - 500: Falha no banco
"""

from typing import Annotated

from fastapi import APIRouter, Path, status

from catalog.core.deps import DbSession
from catalog.schemas.base import MAX_ID, ErrorResponse, MessageResponse
from catalog.schemas.book import BookCreated, BookDto, BookResponse, BookSimple
from catalog.services.book import BookService

router = APIRouter(prefix="/books", tags=["Books"])

BookId = Annotated[int, Path(ge=1, le=MAX_ID, description="ID do livro")]


@router.get(
    "",
    response_model=list[BookResponse],
    summary="Listar livros",
    description="Lista todos os livros com dados do autor.",
)
async def list_books(db: DbSession) -> list[BookResponse]:
    service = BookService(db)
    return await service.list_books()


@router.get(
    "/simple",
    response_model=list[BookSimple],
    summary="Listar livros (simples)",
    description="Lista todos os livros sem dados do autor.",
)
async def list_books_simple(db: DbSession) -> list[BookSimple]:
    service = BookService(db)
    return await service.list_simple()


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Detalhes do livro",
)
async def get_book(book_id: BookId, db: DbSession) -> BookResponse:
    """
    Retorna um livro com dados do autor.

    Raises:
        404: Livro não encontrado
    """
    service = BookService(db)
    return await service.find(book_id)


@router.post(
    "",
    response_model=BookCreated,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
    summary="Criar livro",
)
async def create_book(data: BookDto, db: DbSession) -> BookCreated:
    """
    Cria novo livro.

    Raises:
        400: Campos inválidos
        422: Autor não encontrado
    """
    service = BookService(db)
    book_id = await service.create(data)
    return BookCreated(id=book_id)


@router.put(
    "/{book_id}",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
    summary="Atualizar livro",
)
async def update_book(book_id: BookId, data: BookDto, db: DbSession) -> MessageResponse:
    """
    Atualiza todos os campos do livro.

    Raises:
        400: Campos inválidos
        404: Livro não encontrado
        422: Autor não encontrado
    """
    service = BookService(db)
    await service.update(book_id, data)
    return MessageResponse(message="Livro atualizado com sucesso")


@router.delete(
    "/{book_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Remover livro",
)
async def delete_book(book_id: BookId, db: DbSession) -> MessageResponse:
    service = BookService(db)
    await service.delete(book_id)
    return MessageResponse(message="Livro removido com sucesso")
