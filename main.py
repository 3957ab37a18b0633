"""
Entry point for the Quotebook API
"""

import argparse
import asyncio
import sys
import os
import logging

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from quotebook.config.settings import PORT
from quotebook.database.connection import init_database, close_database

logger = logging.getLogger(__name__)


async def init_db_only():
    """Create the schema and exit"""
    await init_database()
    await close_database()


def main():
    parser = argparse.ArgumentParser(description="Quotebook API server")
    parser.add_argument("--init-db", action="store_true", help="create the tables and exit")
    parser.add_argument("--port", type=int, default=PORT, help=f"listen port (default: {PORT})")
    args = parser.parse_args()

    if args.init_db:
        try:
            asyncio.run(init_db_only())
        except Exception as e:
            logger.critical(f"Schema initialization failed: {e}")
            sys.exit(1)
        logger.info("Schema initialized")
        return

    import uvicorn
    from quotebook.app import app

    logger.info(f"Starting Quotebook API on port {args.port}")
    uvicorn.run(app, host="0.0.0.0", port=args.port)


if __name__ == "__main__":
    main()
