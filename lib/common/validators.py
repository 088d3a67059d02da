"""Validation utilities for URL shortener."""

import re
from typing import Tuple


SHORT_CODE_PATTERN = re.compile(r"^[a-zA-Z0-9]+$")

# Paths the router matches before treating a path as a short code
RESERVED_CODES = {"short"}


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a URL.
    
    Redirect targets are stored as given; only presence is checked.
    
    Args:
        url: The URL to validate
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str) or not url.strip():
        return False, "url is required"
    
    return True, ""


def is_valid_short_code(short_code: str, max_length: int = 64) -> Tuple[bool, str]:
    """Validate a custom short code.
    
    Args:
        short_code: The short code to validate
        max_length: Maximum length for short code
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not short_code or not isinstance(short_code, str):
        return False, "Short code is required"
    
    if len(short_code) > max_length:
        return False, f"Short code must be at most {max_length} characters"
    
    if not SHORT_CODE_PATTERN.match(short_code):
        return False, "Short code can only contain letters and numbers"
    
    if short_code in RESERVED_CODES:
        return False, f"'{short_code}' is a reserved word and cannot be used"
    
    return True, ""
