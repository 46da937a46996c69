"""
Schemas Pydantic para Author.
"""

from catalog.schemas.base import BaseSchema


class AuthorSimple(BaseSchema):
    """Projeção plana do autor, usada em listagens e aninhada em BookResponse."""
    id: int
    firstname: str
    lastname: str
    birthday: str
