"""Error taxonomy for URL shortener."""

from typing import Optional


class ShortenerError(Exception):
    """Base class for all URL shortener errors."""


class ValidationError(ShortenerError):
    """Caller input is missing or malformed."""


class DuplicateCodeError(ShortenerError):
    """A custom short code is already taken."""
    
    def __init__(self, short_code: str):
        self.short_code = short_code
        super().__init__(
            f'Short code "{short_code}" already exists. Please choose a different code.'
        )


class NotFoundError(ShortenerError):
    """No mapping exists for a short code."""
    
    def __init__(self, short_code: str):
        self.short_code = short_code
        super().__init__("Short URL not found")


class AuthError(ShortenerError):
    """Credential check failed.
    
    ``challenge`` is True for the browser-facing Basic Auth scheme, where the
    response must carry a ``WWW-Authenticate`` header, and False for the API
    key scheme, which answers with a JSON error body instead.
    """
    
    def __init__(self, message: str, challenge: bool = False):
        self.challenge = challenge
        super().__init__(message)


class StoreError(ShortenerError):
    """Failure talking to the mapping store."""
    
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)


class CodeCollisionError(ShortenerError):
    """Store rejected an insert because the short code already exists."""
    
    def __init__(self, short_code: str, detail: str = ""):
        self.short_code = short_code
        self.detail = detail
        super().__init__(detail or f"duplicate short code: {short_code}")
