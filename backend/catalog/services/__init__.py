"""
Módulo de serviços - lógica de negócio.
"""

from catalog.services.author import AuthorService
from catalog.services.book import BookService

__all__ = [
    "AuthorService",
    "BookService",
]
