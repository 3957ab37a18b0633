"""
Database connection and pool management
"""

import asyncpg
import logging
from quotebook.config.settings import (
    DATABASE_URL,
    DB_POOL_MIN_SIZE,
    DB_POOL_MAX_SIZE,
    DB_COMMAND_TIMEOUT,
)
from quotebook.database.schema import ensure_schema

logger = logging.getLogger(__name__)

# Global database pool
db_pool = None

async def init_database():
    """Initialize database connection pool and make sure the schema exists.

    Any failure propagates: the application must not serve requests
    without its tables.
    """
    global db_pool
    try:
        db_pool = await asyncpg.create_pool(
            DATABASE_URL,
            min_size=DB_POOL_MIN_SIZE,
            max_size=DB_POOL_MAX_SIZE,
            command_timeout=DB_COMMAND_TIMEOUT,
        )

        async with db_pool.acquire() as conn:
            await conn.fetchval("SELECT 1")
            await ensure_schema(conn)
    except Exception as e:
        logger.critical(f"Database initialization failed: {e}")
        if db_pool:
            await db_pool.close()
            db_pool = None
        raise

    logger.info("Database initialized successfully")


async def close_database():
    """Close database connection pool"""
    global db_pool
    if db_pool:
        await db_pool.close()
        db_pool = None
    logger.info("Database connections closed")

def get_db_pool():
    """Get the database pool instance"""
    return db_pool
