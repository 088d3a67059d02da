"""Business logic service for URL shortener."""

import logging
from typing import Optional, Dict, Any
from datetime import datetime, timezone

from .shortcode import ShortCodeGenerator
from .database.base import MappingStoreBase
from .database.models import ShortUrlMapping
from .errors import (
    CodeCollisionError,
    DuplicateCodeError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from .common.validators import is_valid_url, is_valid_short_code


class URLShortenerService:
    """Service layer for URL shortening business logic.

    Holds no state between calls: every operation is a round trip to the
    store, and uniqueness of short codes is left to the store.
    """

    def __init__(
        self,
        store: MappingStoreBase,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_attempts: int = 5,
    ):
        """Initialize URL shortener service.

        Args:
            store: Mapping store instance
            short_code_generator: Optional short code generator
            logger: Optional logger
            max_attempts: Total insert attempts for generated codes
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.store = store
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.max_attempts = max_attempts

    async def create_short_url(
        self,
        original_url: Optional[str],
        custom_code: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Create a new short URL.

        A custom code gets exactly one insert attempt. Without one, random
        codes are tried until the store accepts one or ``max_attempts`` is
        used up.

        Args:
            original_url: The original long URL
            custom_code: Optional custom short code

        Returns:
            Dictionary with short_code, original_url, created_at

        Raises:
            ValidationError: If the URL is missing or the custom code is malformed
            DuplicateCodeError: If the custom code is already taken
            StoreError: On store failure or when every generated code collided
        """
        is_valid, error = is_valid_url(original_url)
        if not is_valid:
            raise ValidationError(error)

        custom_code = custom_code.strip() if custom_code else None

        if custom_code:
            is_valid, error = is_valid_short_code(custom_code)
            if not is_valid:
                raise ValidationError(f"Invalid short code: {error}")
            mapping = await self._insert_custom(custom_code, original_url)
        else:
            mapping = await self._insert_generated(original_url)

        self.logger.info(f"Created short URL: {mapping.short_code} -> {original_url}")

        return {
            "short_code": mapping.short_code,
            "original_url": mapping.original_url,
            "created_at": mapping.created_at,
        }

    async def _insert_custom(self, short_code: str, original_url: str) -> ShortUrlMapping:
        try:
            return await self.store.insert(
                short_code, original_url, datetime.now(timezone.utc)
            )
        except CodeCollisionError:
            raise DuplicateCodeError(short_code)
        except StoreError as e:
            raise StoreError(f"Failed to create short URL: {e}", cause=e.cause) from e

    async def _insert_generated(self, original_url: str) -> ShortUrlMapping:
        last_collision: Optional[CodeCollisionError] = None

        for attempt in range(1, self.max_attempts + 1):
            short_code = self.generator.generate_random()
            try:
                mapping = await self.store.insert(
                    short_code, original_url, datetime.now(timezone.utc)
                )
            except CodeCollisionError as e:
                self.logger.debug(
                    f"Collision on generated code {short_code} "
                    f"(attempt {attempt}/{self.max_attempts})"
                )
                last_collision = e
                continue
            except StoreError as e:
                raise StoreError(f"Failed to create short URL: {e}", cause=e.cause) from e

            if attempt > 1:
                self.logger.debug(f"Generated code after {attempt} attempts: {short_code}")
            return mapping

        self.logger.warning(
            f"Unable to generate unique short code after {self.max_attempts} attempts"
        )
        raise StoreError(
            f"Failed to create short URL: {last_collision}",
            cause=last_collision,
        )

    async def get_url_info(self, short_code: str) -> ShortUrlMapping:
        """Get the mapping for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            The stored mapping

        Raises:
            NotFoundError: If no mapping exists
            StoreError: On store failure
        """
        mapping = await self.store.select_by_code(short_code)

        if mapping is None:
            self.logger.warning(f"Short code not found: {short_code}")
            raise NotFoundError(short_code)

        self.logger.debug(f"Retrieved URL: {short_code} -> {mapping.original_url}")
        return mapping

    async def delete_short_url(self, short_code: str) -> None:
        """Delete a short URL.

        Deleting a code that does not exist still succeeds.

        Args:
            short_code: The short code to delete

        Raises:
            StoreError: On store failure
        """
        await self.store.delete_by_code(short_code)
        self.logger.info(f"Deleted short URL: {short_code}")

    async def close(self) -> None:
        """Close store connections."""
        await self.store.close()
