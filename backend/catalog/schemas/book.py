"""
Schemas Pydantic para Book.
"""

from datetime import datetime, timezone
from decimal import Decimal

from pydantic import Field, field_validator

from catalog.schemas.author import AuthorSimple
from catalog.schemas.base import MAX_ID, BaseSchema


class BookDto(BaseSchema):
    """Schema para criação e atualização de livro."""
    title: str = Field(..., min_length=1, max_length=255, examples=["Tom Sawyer"])
    release_year: int = Field(..., ge=0, examples=[1876])
    summary: str = Field(..., min_length=1, examples=["An adventure book"])
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, examples=["12.20"])
    author_id: int = Field(..., ge=1, le=MAX_ID, examples=[1])

    @field_validator("release_year")
    @classmethod
    def validate_year(cls, v: int) -> int:
        max_year = datetime.now(timezone.utc).year + 1
        if v > max_year:
            raise ValueError(f"Ano de lançamento não pode passar de {max_year}")
        return v


class BookSimple(BaseSchema):
    """Projeção plana do livro, sem autor."""
    id: int
    title: str
    release_year: int
    summary: str
    price: Decimal


class BookResponse(BookSimple):
    """Livro com capa opcional e autor aninhado."""
    cover: str | None = None
    author: AuthorSimple | None = None


class BookCreated(BaseSchema):
    """Resposta da criação de livro."""
    id: int
