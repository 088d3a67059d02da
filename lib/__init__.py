"""Core business logic for URL shortener: code generation, credentials, mapping service."""

from .shortcode import ShortCodeGenerator
from .service import URLShortenerService
from .errors import (
    ShortenerError,
    ValidationError,
    DuplicateCodeError,
    NotFoundError,
    AuthError,
    StoreError,
)

__all__ = [
    "ShortCodeGenerator",
    "URLShortenerService",
    "ShortenerError",
    "ValidationError",
    "DuplicateCodeError",
    "NotFoundError",
    "AuthError",
    "StoreError",
]
