"""
Schemas base reutilizáveis em toda a aplicação.
"""

from typing import List

from pydantic import BaseModel, ConfigDict

# Maior valor de uma coluna Integer (int4) no PostgreSQL
MAX_ID = 2**31 - 1


class BaseSchema(BaseModel):
    """Schema base com configurações padrão."""
    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
    )


class ErrorDetail(BaseModel):
    """Detalhe de um erro."""
    field: str | None = None
    message: str


class ErrorResponse(BaseModel):
    """
    Resposta de erro padrão.

    Gerada a partir de qualquer CatalogError pelo handler em catalog.main:
        {
            "error": "validation_error",
            "message": "Dados do livro inválidos",
            "details": [{"field": "price", "message": "..."}]
        }
    """
    error: str
    message: str
    details: List[ErrorDetail] | None = None


class MessageResponse(BaseModel):
    """Resposta simples com mensagem."""
    message: str
