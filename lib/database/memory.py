"""In-memory mapping store, for local runs and tests."""

import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, Optional

from ..errors import CodeCollisionError
from .base import MappingStoreBase
from .models import ShortUrlMapping


class InMemoryMappingStore(MappingStoreBase):
    """Dict-backed store. State lives only as long as the process."""
    
    name = "memory"
    
    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self._rows: Dict[str, ShortUrlMapping] = {}
    
    async def insert(
        self,
        short_code: str,
        original_url: str,
        created_at: Optional[datetime] = None,
    ) -> ShortUrlMapping:
        if short_code in self._rows:
            raise CodeCollisionError(short_code)
        
        mapping = ShortUrlMapping(
            short_code=short_code,
            original_url=original_url,
            created_at=created_at or datetime.now(timezone.utc),
            id=str(uuid.uuid4()),
        )
        self._rows[short_code] = mapping
        return mapping
    
    async def select_by_code(self, short_code: str) -> Optional[ShortUrlMapping]:
        return self._rows.get(short_code)
    
    async def delete_by_code(self, short_code: str) -> None:
        self._rows.pop(short_code, None)
    
    def __len__(self) -> int:
        return len(self._rows)
