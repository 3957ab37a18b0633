"""
Parameterized SQL statements for authors and quotes

Every function takes an open asyncpg connection so callers decide the
transaction scope. User input is only ever bound as a positional
parameter.
"""

from typing import Any, Dict, List, Optional

INSERT_AUTHOR = """
    INSERT INTO authors(name) VALUES ($1)
    RETURNING id, name
"""

INSERT_QUOTE = """
    INSERT INTO quotes(quote, author_id) VALUES ($1, $2)
    RETURNING id, quote, author_id
"""

SELECT_AUTHOR_BY_ID = """
    SELECT id, name FROM authors WHERE id = $1
"""

# {op} is LIKE or ILIKE, chosen from a fixed set, never from input
SELECT_AUTHORS_MATCHING = """
    SELECT id, name FROM authors WHERE name {op} $1 ORDER BY id
"""

SELECT_QUOTES_MATCHING = """
    SELECT quote FROM quotes WHERE author_id = $1 AND quote {op} $2 ORDER BY id
"""


def like_operator(case_sensitive: bool) -> str:
    """LIKE when case matters, Postgres' ILIKE otherwise"""
    return "LIKE" if case_sensitive else "ILIKE"


def like_pattern(text: Optional[str]) -> str:
    """Wrap a substring with % wildcards for a contains-match"""
    return f"%{text or ''}%"


async def find_authors_by_pattern(conn, pattern: str, case_sensitive: bool = False) -> List[Dict[str, Any]]:
    """Authors whose name matches an already-wrapped LIKE pattern"""
    query = SELECT_AUTHORS_MATCHING.format(op=like_operator(case_sensitive))
    rows = await conn.fetch(query, pattern)
    return [dict(row) for row in rows]


async def get_author_by_id(conn, author_id: int) -> Optional[Dict[str, Any]]:
    row = await conn.fetchrow(SELECT_AUTHOR_BY_ID, author_id)
    return dict(row) if row else None


async def insert_author(conn, name: str) -> Dict[str, Any]:
    """Insert one author and return the stored row, generated id included"""
    row = await conn.fetchrow(INSERT_AUTHOR, name)
    if not row:
        raise RuntimeError("Insert operation failed - no author returned")
    return dict(row)


async def insert_quote(conn, text: str, author_id: int) -> Dict[str, Any]:
    """
    Insert one quote for an existing author.

    Raises:
        asyncpg.ForeignKeyViolationError: author_id does not exist
    """
    row = await conn.fetchrow(INSERT_QUOTE, text, author_id)
    if not row:
        raise RuntimeError("Insert operation failed - no quote returned")
    return dict(row)


async def find_quotes_by_author_and_pattern(
    conn,
    author_id: int,
    pattern: str,
    case_sensitive: bool = False
) -> List[str]:
    """Quote texts of one author matching an already-wrapped LIKE pattern"""
    query = SELECT_QUOTES_MATCHING.format(op=like_operator(case_sensitive))
    rows = await conn.fetch(query, author_id, pattern)
    return [row["quote"] for row in rows]
