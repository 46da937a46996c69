"""
Módulo de repositórios - acesso a dados.
"""

from catalog.repositories.base import BaseRepository
from catalog.repositories.author import AuthorRepository
from catalog.repositories.book import BookRepository

__all__ = [
    "BaseRepository",
    "AuthorRepository",
    "BookRepository",
]
