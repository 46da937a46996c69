"""
Exceções de domínio do catálogo.

Services e repositories levantam estas exceções; a camada HTTP converte
cada uma no status code correspondente (ver handler em catalog.main).

Hierarquia:
    CatalogError
    ├── QueryError           500  falha do banco ou de decodificação
    ├── NotFoundError        404  nenhuma linha retornada/afetada
    ├── AuthorNotFoundError  422  author_id não resolve para um autor
    └── ValidationError      400  campo malformado ou fora do intervalo
"""

from typing import Any

from fastapi import status

from catalog.schemas.base import ErrorDetail, ErrorResponse


class CatalogError(Exception):
    """Base de todas as exceções de domínio."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "catalog_error"

    def __init__(self, message: str, details: list[ErrorDetail] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            error=self.error,
            message=self.message,
            details=self.details,
        )


class QueryError(CatalogError):
    """Falha ao executar ou decodificar um statement no banco."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error = "query_error"


class NotFoundError(CatalogError):
    """Registro não encontrado (zero linhas retornadas ou afetadas)."""

    status_code = status.HTTP_404_NOT_FOUND
    error = "not_found"


class AuthorNotFoundError(CatalogError):
    """O autor referenciado por author_id não existe."""

    status_code = status.HTTP_422_UNPROCESSABLE_CONTENT
    error = "author_not_found"


class ValidationError(CatalogError):
    """Dados de entrada inválidos."""

    status_code = status.HTTP_400_BAD_REQUEST
    error = "validation_error"


def errors_to_details(errors: list[dict[str, Any]]) -> list[ErrorDetail]:
    """
    Converte a lista de erros do pydantic (exc.errors()) em ErrorDetail.

    O campo é o último elemento de loc: ("body", "price") vira "price".
    """
    return [
        ErrorDetail(
            field=str(err["loc"][-1]) if err.get("loc") else None,
            message=err["msg"],
        )
        for err in errors
    ]
