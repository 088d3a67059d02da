"""Forwarded headers middleware."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

from lib.common.headers import extract_forwarded_headers


class ForwardedHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to resolve the caller's IP behind a proxy."""
    
    async def dispatch(self, request: Request, call_next: Callable):
        """Store the effective client IP (first X-Forwarded-For hop) in request state."""
        forwarded_for = extract_forwarded_headers(request.headers)["forwarded_for"]
        
        if forwarded_for:
            request.state.client_ip = forwarded_for.split(",")[0].strip()
        else:
            request.state.client_ip = request.client.host if request.client else "unknown"
        
        return await call_next(request)
