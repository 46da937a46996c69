"""
Testes dos endpoints de livros e autores (sessão mockada).

Verificam o contrato HTTP: formato das respostas e conversão dos erros
de domínio em status codes.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError


# ==========================================
# Books
# ==========================================

@pytest.mark.anyio
async def test_list_books(client: AsyncClient, mock_db, make_result, book_rows):
    mock_db.execute.return_value = make_result(rows=book_rows)

    response = await client.get("/api/v1/books")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 2
    assert data[0]["title"] == "Tom Sawyer"
    assert data[0]["author"] == {
        "id": 1,
        "firstname": "Mark",
        "lastname": "Twain",
        "birthday": "1835-11-30",
    }


@pytest.mark.anyio
async def test_list_books_simple(client: AsyncClient, mock_db, make_result, book_rows):
    mock_db.execute.return_value = make_result(rows=book_rows)

    response = await client.get("/api/v1/books/simple")

    assert response.status_code == 200
    assert set(response.json()[0]) == {"id", "title", "release_year", "summary", "price"}


@pytest.mark.anyio
async def test_get_book_null_cover(client: AsyncClient, mock_db, make_result):
    row = (3, "Untitled", 2001, "No cover", 9.5, None, 1, "Mark", "Twain", "1835-11-30")
    mock_db.execute.return_value = make_result(rows=[row])

    response = await client.get("/api/v1/books/3")

    assert response.status_code == 200
    assert response.json()["cover"] is None


@pytest.mark.anyio
async def test_get_book_not_found(client: AsyncClient, mock_db, make_result):
    mock_db.execute.return_value = make_result(rows=[])

    response = await client.get("/api/v1/books/404")

    assert response.status_code == 404
    assert response.json()["error"] == "not_found"


@pytest.mark.anyio
async def test_create_book(client: AsyncClient, mock_db, make_result, author_row):
    mock_db.execute.side_effect = [
        make_result(rows=[author_row]),
        make_result(scalar=7),
    ]

    response = await client.post(
        "/api/v1/books",
        json={
            "title": "Tom Sawyer",
            "release_year": 1923,
            "summary": "An adventure book",
            "price": 12.2,
            "author_id": 1,
        },
    )

    assert response.status_code == 201
    assert response.json() == {"id": 7}


@pytest.mark.anyio
async def test_create_book_author_not_found(client: AsyncClient, mock_db, make_result):
    mock_db.execute.return_value = make_result(rows=[])

    response = await client.post(
        "/api/v1/books",
        json={
            "title": "Tom Sawyer",
            "release_year": 1923,
            "summary": "An adventure book",
            "price": 12.2,
            "author_id": 99,
        },
    )

    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "author_not_found"
    assert data["details"][0]["field"] == "author_id"


@pytest.mark.anyio
async def test_create_book_invalid_price(client: AsyncClient, mock_db):
    response = await client.post(
        "/api/v1/books",
        json={
            "title": "Tom Sawyer",
            "release_year": 1923,
            "summary": "An adventure book",
            "price": -3,
            "author_id": 1,
        },
    )

    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"
    mock_db.execute.assert_not_awaited()


@pytest.mark.anyio
async def test_create_book_malformed_body(client: AsyncClient, mock_db):
    """Tipo errado no corpo: 400 validation_error, sem tocar no banco."""
    response = await client.post(
        "/api/v1/books",
        json={
            "title": "Tom Sawyer",
            "release_year": "abc",
            "summary": "An adventure book",
            "price": 12.2,
            "author_id": 1,
        },
    )

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "validation_error"
    assert [d["field"] for d in data["details"]] == ["release_year"]
    mock_db.execute.assert_not_awaited()


@pytest.mark.anyio
async def test_create_book_missing_field(client: AsyncClient, mock_db):
    response = await client.post(
        "/api/v1/books",
        json={"title": "Tom Sawyer", "release_year": 1923, "price": 12.2, "author_id": 1},
    )

    assert response.status_code == 400
    assert [d["field"] for d in response.json()["details"]] == ["summary"]


@pytest.mark.anyio
async def test_create_book_price_overflow(client: AsyncClient, mock_db):
    """Preço que não cabe em Numeric(10, 2): 400, sem INSERT."""
    response = await client.post(
        "/api/v1/books",
        json={
            "title": "Tom Sawyer",
            "release_year": 1923,
            "summary": "An adventure book",
            "price": "123456789012.999",
            "author_id": 1,
        },
    )

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "price"
    mock_db.execute.assert_not_awaited()


@pytest.mark.anyio
async def test_create_book_author_id_above_int4(client: AsyncClient, mock_db):
    response = await client.post(
        "/api/v1/books",
        json={
            "title": "Tom Sawyer",
            "release_year": 1923,
            "summary": "An adventure book",
            "price": 12.2,
            "author_id": 2**40,
        },
    )

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "author_id"
    mock_db.execute.assert_not_awaited()


@pytest.mark.anyio
async def test_book_id_out_of_range(client: AsyncClient, mock_db):
    """IDs fora do int4 são rejeitados antes de chegar ao banco."""
    for path in ("/api/v1/books/0", f"/api/v1/books/{2**31}", f"/api/v1/authors/{2**40}"):
        response = await client.get(path)

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    response = await client.delete(f"/api/v1/books/{2**31}")
    assert response.status_code == 400
    mock_db.execute.assert_not_awaited()


@pytest.mark.anyio
async def test_update_book_not_found(client: AsyncClient, mock_db, make_result, author_row):
    mock_db.execute.side_effect = [
        make_result(rows=[author_row]),
        make_result(rowcount=0),
    ]

    response = await client.put(
        "/api/v1/books/1",
        json={
            "title": "Tom Sawyer",
            "release_year": 1923,
            "summary": "An adventure book",
            "price": 12.2,
            "author_id": 1,
        },
    )

    assert response.status_code == 404


@pytest.mark.anyio
async def test_delete_book(client: AsyncClient, mock_db, make_result):
    mock_db.execute.return_value = make_result(rowcount=1)

    response = await client.delete("/api/v1/books/1")

    assert response.status_code == 200
    assert "removido" in response.json()["message"]


@pytest.mark.anyio
async def test_query_error_returns_500(client: AsyncClient, mock_db):
    mock_db.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

    response = await client.get("/api/v1/books")

    assert response.status_code == 500
    assert response.json()["error"] == "query_error"


# ==========================================
# Authors
# ==========================================

@pytest.mark.anyio
async def test_list_authors(client: AsyncClient, mock_db, make_result, author_row):
    mock_db.execute.return_value = make_result(rows=[author_row])

    response = await client.get("/api/v1/authors")

    assert response.status_code == 200
    assert response.json()[0]["lastname"] == "Twain"


@pytest.mark.anyio
async def test_get_author_not_found(client: AsyncClient, mock_db, make_result):
    mock_db.execute.return_value = make_result(rows=[])

    response = await client.get("/api/v1/authors/5")

    assert response.status_code == 404
