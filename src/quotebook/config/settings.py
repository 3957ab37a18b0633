"""
Configuration settings for the Quotebook API
"""

import os
import logging
from dotenv import load_dotenv

# Local development reads .env; production relies on the real environment
ENV = os.getenv("ENV", "development")
if ENV != "production":
    load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Configure logging
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)

# Database configuration
DATABASE_URL = os.getenv("PGURL") or os.getenv("DATABASE_URL")
DB_POOL_MIN_SIZE = int(os.getenv("DB_POOL_MIN_SIZE", 1))
DB_POOL_MAX_SIZE = int(os.getenv("DB_POOL_MAX_SIZE", 10))
DB_COMMAND_TIMEOUT = float(os.getenv("DB_COMMAND_TIMEOUT", 60))

PORT = int(os.getenv("PORT", 8080))

# LIKE vs ILIKE for every substring search (authors and quotes alike)
SEARCH_CASE_SENSITIVE = os.getenv("SEARCH_CASE_SENSITIVE", "false").strip().lower() in ("1", "true", "yes", "on")

logger.info(f"Environment: {ENV}")
logger.info(f"Search mode: {'case-sensitive (LIKE)' if SEARCH_CASE_SENSITIVE else 'case-insensitive (ILIKE)'}")

# Validate required environment variables
if not DATABASE_URL:
    raise ValueError("PGURL environment variable is required")

# CORS settings
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()]
