"""Build externally visible short links from the incoming request."""

from fastapi import Request

from lib.common.headers import build_base_url, build_short_url


def origin_for(request: Request) -> str:
    """Origin the caller reached us on (proxy headers, then Host, then config)."""
    config = request.app.state.config
    return build_base_url(
        headers=request.headers,
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )


def short_url_for(request: Request, short_code: str) -> str:
    """Complete short URL for a code."""
    return build_short_url(short_code=short_code, base_url=origin_for(request))
