"""
Table bootstrap for authors and quotes
"""

import logging

logger = logging.getLogger(__name__)

# authors must exist before quotes references it
CREATE_AUTHORS_TABLE = """
    CREATE TABLE IF NOT EXISTS authors (
        id SERIAL PRIMARY KEY,
        name VARCHAR(50)
    )
"""

CREATE_QUOTES_TABLE = """
    CREATE TABLE IF NOT EXISTS quotes (
        id SERIAL PRIMARY KEY,
        quote TEXT,
        author_id INTEGER,
        FOREIGN KEY (author_id)
            REFERENCES authors(id)
    )
"""

SCHEMA_STATEMENTS = (
    ("authors", CREATE_AUTHORS_TABLE),
    ("quotes", CREATE_QUOTES_TABLE),
)


async def ensure_schema(conn) -> None:
    """
    Create the authors and quotes tables if they are missing.

    Safe to run on every start. Errors are logged and re-raised.

    Args:
        conn: An open asyncpg connection
    """
    async with conn.transaction():
        for table_name, statement in SCHEMA_STATEMENTS:
            try:
                await conn.execute(statement)
            except Exception as e:
                logger.error(f"Failed to create table '{table_name}': {e}")
                raise
            logger.info(f"Table '{table_name}' is ready")
