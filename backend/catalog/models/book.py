"""
Model de livro.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.db.session import Base
from catalog.models.base import IntegerIDMixin

if TYPE_CHECKING:
    from catalog.models.author import Author


class Book(Base, IntegerIDMixin):
    """
    Livro do catálogo.

    Todo livro persistido pertence a exatamente um autor (garantido pela FK).

    Attributes:
        id: ID do livro
        title: Título
        release_year: Ano de lançamento
        summary: Resumo
        price: Preço
        cover: Arquivo da capa (opcional)
        author_id: FK para o autor
        author: Autor do livro
    """
    __tablename__ = "book"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    release_year: Mapped[int] = mapped_column(Integer, nullable=False)
    summary: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    cover: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("author.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    # Relationships
    author: Mapped["Author"] = relationship("Author")

    def __repr__(self) -> str:
        return f"<Book {self.title}>"
