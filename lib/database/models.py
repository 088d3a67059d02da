"""Data models for URL shortener."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class ShortUrlMapping:
    """Represents a short code -> URL mapping in the store."""
    
    short_code: str
    original_url: str
    created_at: datetime
    id: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "short_code": self.short_code,
            "original_url": self.original_url,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShortUrlMapping":
        """Create from dictionary (a database row or a PostgREST record)."""
        created_at = data["created_at"]
        if not isinstance(created_at, datetime):
            # PostgREST may emit a trailing 'Z' that older fromisoformat rejects
            created_at = datetime.fromisoformat(str(created_at).replace("Z", "+00:00"))
        row_id = data.get("id")
        return cls(
            short_code=data["short_code"],
            original_url=data["original_url"],
            created_at=created_at,
            id=str(row_id) if row_id is not None else None,
        )
