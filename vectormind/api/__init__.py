"""
API module for FastAPI endpoints.

This module contains all API route handlers organized by resource type.
"""

from .health import router as health_router
from .embeddings import router as embeddings_router
from .search import router as search_router
from .chunking import router as chunking_router

__all__ = [
    "health_router",
    "embeddings_router",
    "search_router",
    "chunking_router",
]
