"""
Mapeamento entre entidades e DTOs.
"""

from catalog.mapper.book import (
    map_to_author_simple,
    map_to_book_entity,
    map_to_book_response,
    map_to_book_simple,
)

__all__ = [
    "map_to_author_simple",
    "map_to_book_entity",
    "map_to_book_response",
    "map_to_book_simple",
]
