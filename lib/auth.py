"""Credential checks for the UI (Basic Auth) and API (static key) schemes."""

import base64
import binascii
import secrets
from typing import Optional, Tuple


BASIC_AUTH_REALM = "URL Shortener"
API_KEY_HEADER = "X-API-Key"


def parse_basic_auth(authorization: Optional[str]) -> Tuple[str, str]:
    """Decode a Basic Auth header into (username, password).

    Anything that is not a well-formed ``Basic`` header decodes to a pair of
    empty strings, so callers compare it exactly like a wrong credential.

    Args:
        authorization: Raw value of the Authorization header

    Returns:
        Tuple of (username, password)
    """
    if not authorization:
        return "", ""

    scheme, _, encoded = authorization.partition(" ")
    if scheme.lower() != "basic" or not encoded:
        return "", ""

    try:
        decoded = base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return "", ""

    username, sep, password = decoded.partition(":")
    if not sep:
        return "", ""
    return username, password


def _matches(provided: str, expected: str) -> bool:
    return secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


def verify_basic_auth(authorization: Optional[str], username: str, password: str) -> bool:
    """Check a Basic Auth header against the configured UI credentials.

    Both parts are always compared so a wrong username takes the same path
    as a wrong password.

    Args:
        authorization: Raw value of the Authorization header (may be None)
        username: Configured UI username
        password: Configured UI password

    Returns:
        True if both username and password match
    """
    given_user, given_pass = parse_basic_auth(authorization)
    user_ok = _matches(given_user, username)
    pass_ok = _matches(given_pass, password)
    return bool(username) and user_ok and pass_ok


def verify_api_key(provided: Optional[str], secret: str) -> bool:
    """Check an X-API-Key header value against the configured secret.

    Args:
        provided: Header value (None when the header is absent)
        secret: Configured API secret

    Returns:
        True if the key matches
    """
    matched = _matches(provided or "", secret)
    return bool(secret) and matched


def challenge_header() -> str:
    """Value for the WWW-Authenticate header sent with a UI 401."""
    return f'Basic realm="{BASIC_AUTH_REALM}"'
