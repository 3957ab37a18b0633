"""
Integration tests against a real PostgreSQL server

Set TEST_PGURL to run them. Every test works inside its own throwaway
schema so ids start at 1 and nothing leaks between tests.
"""

import asyncio
import os
import uuid

import asyncpg
import pytest
import pytest_asyncio

from quotebook.database import queries
from quotebook.database.schema import ensure_schema
from quotebook.models.enums import ErrorType
from quotebook.services.author_quotes_service import AuthorQuotesService
from quotebook.services.authors_service import AuthorsService
from quotebook.services.quotes_service import QuotesService

TEST_PGURL = os.getenv("TEST_PGURL")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not TEST_PGURL, reason="TEST_PGURL not set"),
]


@pytest_asyncio.fixture
async def pool(monkeypatch):
    """Pool bound to a fresh schema, installed as the service pool"""
    schema = f"quotebook_test_{uuid.uuid4().hex[:12]}"

    admin = await asyncpg.connect(TEST_PGURL)
    await admin.execute(f'CREATE SCHEMA "{schema}"')

    test_pool = await asyncpg.create_pool(
        TEST_PGURL, min_size=1, max_size=4, server_settings={"search_path": schema}
    )
    async with test_pool.acquire() as conn:
        await ensure_schema(conn)
    monkeypatch.setattr("quotebook.services.base_service.get_db_pool", lambda: test_pool)

    yield test_pool

    await test_pool.close()
    await admin.execute(f'DROP SCHEMA "{schema}" CASCADE')
    await admin.close()


async def count_rows(pool, table):
    async with pool.acquire() as conn:
        return await conn.fetchval(f"SELECT count(*) FROM {table}")


@pytest.mark.asyncio
async def test_mark_twain_round_trip(pool):
    created = await AuthorQuotesService().create_author_with_quote(
        "Mark Twain", "Truth is stranger than fiction."
    )

    assert created.success
    assert created.data[0] == {
        "author": {"id": 1, "name": "Mark Twain"},
        "quote": {"id": 1, "quote": "Truth is stranger than fiction.", "author_id": 1},
    }

    found = await AuthorsService(case_sensitive=False).search_authors("twain")
    assert found.data == [{"id": 1, "name": "Mark Twain"}]

    quotes = await QuotesService(case_sensitive=False).search_author_quotes(1, "STRANGER")
    assert quotes.data == ["Truth is stranger than fiction."]


@pytest.mark.asyncio
async def test_created_ids_match_committed_rows(pool, author_name):
    created = await AuthorQuotesService().create_author_with_quote(author_name, "A line worth keeping.")
    author = created.data[0]["author"]

    async with pool.acquire() as conn:
        stored = await conn.fetchrow("SELECT id, name FROM authors WHERE id = $1", author["id"])
        quote_author = await conn.fetchval(
            "SELECT author_id FROM quotes WHERE id = $1", created.data[0]["quote"]["id"]
        )

    assert dict(stored) == author
    assert quote_author == author["id"]


@pytest.mark.asyncio
async def test_failed_quote_leaves_no_orphan_author(pool, monkeypatch):
    insert_quote = queries.insert_quote

    async def failing_insert_quote(conn, text, author_id):
        # Violates the foreign key from inside the same transaction
        return await insert_quote(conn, text, author_id + 1000)

    monkeypatch.setattr(queries, "insert_quote", failing_insert_quote)

    result = await AuthorQuotesService().create_author_with_quote("Orphan Candidate", "Never stored")

    assert result.error_type == ErrorType.FOREIGN_KEY_ERROR
    assert await count_rows(pool, "authors") == 0
    assert await count_rows(pool, "quotes") == 0


@pytest.mark.asyncio
async def test_schema_init_is_idempotent(pool):
    async with pool.acquire() as conn:
        await ensure_schema(conn)
        await ensure_schema(conn)
        tables = await conn.fetch(
            "SELECT table_name FROM information_schema.tables "
            "WHERE table_schema = current_schema() ORDER BY table_name"
        )

    assert [row["table_name"] for row in tables] == ["authors", "quotes"]


@pytest.mark.asyncio
async def test_search_case_sensitivity(pool):
    await AuthorsService().create_author("Shakespeare")

    insensitive = await AuthorsService(case_sensitive=False).search_authors("shakespeare")
    sensitive = await AuthorsService(case_sensitive=True).search_authors("shakespeare")

    assert [row["name"] for row in insensitive.data] == ["Shakespeare"]
    assert sensitive.error_type == ErrorType.NOT_FOUND


@pytest.mark.asyncio
async def test_quote_for_missing_author_is_rejected(pool):
    async with pool.acquire() as conn:
        with pytest.raises(asyncpg.ForeignKeyViolationError):
            await queries.insert_quote(conn, "Nobody said this", 12345)

    assert await count_rows(pool, "quotes") == 0


@pytest.mark.asyncio
async def test_name_too_long_for_column_is_rejected(pool):
    # Bypasses the service's own length check to exercise the column limit
    async with pool.acquire() as conn:
        with pytest.raises(asyncpg.StringDataRightTruncationError):
            await queries.insert_author(conn, "x" * 51)


@pytest.mark.asyncio
async def test_concurrent_creations_keep_their_own_ids(pool):
    service = AuthorQuotesService()
    results = await asyncio.gather(*[
        service.create_author_with_quote(f"Author {i}", f"Quote {i}") for i in range(10)
    ])

    for i, result in enumerate(results):
        created = result.data[0]
        assert created["author"]["name"] == f"Author {i}"
        assert created["quote"]["quote"] == f"Quote {i}"
        assert created["quote"]["author_id"] == created["author"]["id"]
