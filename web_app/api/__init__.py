"""JSON API for managing short URLs."""

from .routes import router as api_router

__all__ = ["api_router"]
