"""
Quotebook API Server
Authors and their quotes, backed by PostgreSQL
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quotebook.config.settings import ALLOWED_ORIGINS
from quotebook.database.connection import init_database, close_database
from quotebook.api.routes import health, authors, quotes, author_quotes, legacy
from quotebook.utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager; a failing schema setup aborts startup"""
    await init_database()
    yield
    await close_database()

# FastAPI app initialization
app = FastAPI(
    title="Quotebook API",
    description="Search authors, create author/quote pairs and search an author's quotes",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

setup_error_handling(app)

# Include API routes
app.include_router(health.router, prefix="/health", tags=["Health"])
app.include_router(authors.router, prefix="/authors", tags=["Authors"])
app.include_router(quotes.router, prefix="/authors", tags=["Quotes"])
app.include_router(author_quotes.router, prefix="/authors-quotes", tags=["Authors and Quotes"])
app.include_router(legacy.router)
