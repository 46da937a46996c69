"""
Schemas Pydantic da aplicação.
"""

from catalog.schemas.base import (
    BaseSchema,
    ErrorDetail,
    ErrorResponse,
    MessageResponse,
)
from catalog.schemas.health import HealthResponse
from catalog.schemas.author import AuthorSimple
from catalog.schemas.book import (
    BookCreated,
    BookDto,
    BookResponse,
    BookSimple,
)

__all__ = [
    # Base
    "BaseSchema",
    "ErrorDetail",
    "ErrorResponse",
    "MessageResponse",
    # Health
    "HealthResponse",
    # Author
    "AuthorSimple",
    # Book
    "BookCreated",
    "BookDto",
    "BookResponse",
    "BookSimple",
]
