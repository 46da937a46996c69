"""
Models SQLAlchemy da aplicação.

Importar todos os models aqui para que Base.metadata conheça todas as tabelas.
"""

from catalog.models.author import Author
from catalog.models.book import Book

__all__ = [
    "Author",
    "Book",
]
