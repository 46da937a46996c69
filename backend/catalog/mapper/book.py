"""
Conversões entre entidades (models) e DTOs (schemas) de livro e autor.

Funções puras: não acessam o banco e não alteram os objetos recebidos.
"""

from catalog.models.author import Author
from catalog.models.book import Book
from catalog.schemas.author import AuthorSimple
from catalog.schemas.book import BookDto, BookResponse, BookSimple


def map_to_author_simple(author: Author) -> AuthorSimple:
    return AuthorSimple(
        id=author.id,
        firstname=author.firstname,
        lastname=author.lastname,
        birthday=author.birthday,
    )


def map_to_book_simple(book: Book) -> BookSimple:
    return BookSimple(
        id=book.id,
        title=book.title,
        release_year=book.release_year,
        summary=book.summary,
        price=book.price,
    )


def map_to_book_response(book: Book) -> BookResponse:
    """
    Converte um livro com autor carregado na resposta da API.

    cover ausente vira None; autor ausente (LEFT JOIN sem par) vira None.
    """
    author = book.author
    return BookResponse(
        id=book.id,
        title=book.title,
        release_year=book.release_year,
        summary=book.summary,
        price=book.price,
        cover=book.cover,
        author=map_to_author_simple(author) if author is not None else None,
    )


def map_to_book_entity(dto: BookDto, author: Author) -> Book:
    """
    Monta a entidade Book a partir do DTO e do autor já resolvido.

    O id fica None: é gerado pelo banco na criação.
    """
    return Book(
        id=None,
        title=dto.title,
        release_year=dto.release_year,
        summary=dto.summary,
        price=dto.price,
        cover=None,
        author_id=author.id,
        author=author,
    )
