"""
Model de autor de livros.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.db.session import Base
from catalog.models.base import IntegerIDMixin


class Author(Base, IntegerIDMixin):
    """
    Autor de livros.

    Attributes:
        id: ID do autor
        firstname: Primeiro nome
        lastname: Sobrenome
        birthday: Data de nascimento em texto ISO (YYYY-MM-DD)
    """
    __tablename__ = "author"

    firstname: Mapped[str] = mapped_column(String(255), nullable=False)
    lastname: Mapped[str] = mapped_column(String(255), nullable=False)
    birthday: Mapped[str] = mapped_column(String(10), nullable=False)

    def __repr__(self) -> str:
        return f"<Author {self.firstname} {self.lastname}>"
