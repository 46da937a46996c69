"""
Endpoints de Autores (somente leitura).

Contratos:
    - GET /authors: Lista autores
    - GET /authors/{id}: Detalhes do autor
"""

from typing import Annotated

from fastapi import APIRouter, Path

from catalog.core.deps import DbSession
from catalog.mapper.book import map_to_author_simple
from catalog.schemas.author import AuthorSimple
from catalog.schemas.base import MAX_ID, ErrorResponse
from catalog.services.author import AuthorService

router = APIRouter(prefix="/authors", tags=["Authors"])

AuthorId = Annotated[int, Path(ge=1, le=MAX_ID, description="ID do autor")]


@router.get(
    "",
    response_model=list[AuthorSimple],
    summary="Listar autores",
)
async def list_authors(db: DbSession) -> list[AuthorSimple]:
    service = AuthorService(db)
    return await service.list_authors()


@router.get(
    "/{author_id}",
    response_model=AuthorSimple,
    responses={404: {"model": ErrorResponse}},
    summary="Detalhes do autor",
)
async def get_author(author_id: AuthorId, db: DbSession) -> AuthorSimple:
    """
    Retorna um autor.

    Raises:
        404: Autor não encontrado
    """
    service = AuthorService(db)
    author = await service.get_by_id(author_id)
    return map_to_author_simple(author)
