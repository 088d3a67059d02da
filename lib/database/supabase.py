"""Supabase (PostgREST) implementation of the mapping store."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import httpx

from ..errors import CodeCollisionError, StoreError
from .base import MappingStoreBase
from .models import ShortUrlMapping


# PostgreSQL SQLSTATE for unique_violation, echoed by PostgREST in the error body
UNIQUE_VIOLATION = "23505"


class SupabaseMappingStore(MappingStoreBase):
    """Store backed by the ``short_urls`` table of a Supabase project.

    Talks to the PostgREST endpoint at ``{supabase_url}/rest/v1/short_urls``
    using the project key for both the ``apikey`` and bearer headers.
    """

    name = "supabase"
    TABLE = "short_urls"

    def __init__(
        self,
        supabase_url: str,
        supabase_key: str,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize Supabase store.

        Args:
            supabase_url: Project URL (e.g., https://xyz.supabase.co)
            supabase_key: Service key for the project
            timeout_seconds: Request timeout
            transport: Optional httpx transport (tests pass a MockTransport)
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.client = httpx.AsyncClient(
            base_url=f"{supabase_url.rstrip('/')}/rest/v1",
            headers={
                "apikey": supabase_key,
                "Authorization": f"Bearer {supabase_key}",
            },
            timeout=timeout_seconds,
            transport=transport,
        )

    @staticmethod
    def _error_body(response: httpx.Response) -> Dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    def _is_unique_violation(self, response: httpx.Response) -> bool:
        """Decide from the structured error code, falling back to 409 Conflict."""
        code = self._error_body(response).get("code")
        if code:
            return code == UNIQUE_VIOLATION
        return response.status_code == httpx.codes.CONFLICT

    async def _request(self, method: str, **kwargs) -> httpx.Response:
        try:
            return await self.client.request(method, f"/{self.TABLE}", **kwargs)
        except httpx.HTTPError as e:
            self.logger.error(f"Supabase {method} failed: {e}")
            raise StoreError(str(e) or e.__class__.__name__, cause=e) from e

    async def insert(
        self,
        short_code: str,
        original_url: str,
        created_at: Optional[datetime] = None,
    ) -> ShortUrlMapping:
        created_at = created_at or datetime.now(timezone.utc)
        response = await self._request(
            "POST",
            json={
                "short_code": short_code,
                "original_url": original_url,
                "created_at": created_at.isoformat(),
            },
            headers={"Prefer": "return=representation"},
        )

        if response.is_success:
            rows = response.json()
            if rows:
                return ShortUrlMapping.from_dict(rows[0])
            return ShortUrlMapping(short_code, original_url, created_at)

        if self._is_unique_violation(response):
            self.logger.warning(f"Short code already exists: {short_code}")
            raise CodeCollisionError(short_code, detail=response.text)

        self.logger.error(f"Error creating short URL: {response.status_code} {response.text}")
        raise StoreError(response.text or f"HTTP {response.status_code}")

    async def select_by_code(self, short_code: str) -> Optional[ShortUrlMapping]:
        response = await self._request(
            "GET",
            params={"short_code": f"eq.{short_code}", "select": "*"},
        )
        if not response.is_success:
            self.logger.error(f"Error getting URL mapping: {response.status_code} {response.text}")
            raise StoreError(response.text or f"HTTP {response.status_code}")

        rows = response.json()
        if rows:
            return ShortUrlMapping.from_dict(rows[0])
        return None

    async def delete_by_code(self, short_code: str) -> None:
        response = await self._request(
            "DELETE",
            params={"short_code": f"eq.{short_code}"},
        )
        if not response.is_success:
            self.logger.error(f"Error deleting short URL: {response.status_code} {response.text}")
            raise StoreError(response.text or f"HTTP {response.status_code}")

    async def close(self) -> None:
        await self.client.aclose()
