"""Shared helpers: input validation, origin detection, short link assembly, logging."""

from .validators import is_valid_url, is_valid_short_code, RESERVED_CODES
from .headers import extract_forwarded_headers, build_base_url, build_short_url
from .logging_config import setup_logging, get_logger, JsonFormatter

__all__ = [
    "is_valid_url",
    "is_valid_short_code",
    "RESERVED_CODES",
    "extract_forwarded_headers",
    "build_base_url",
    "build_short_url",
    "setup_logging",
    "get_logger",
    "JsonFormatter",
]
