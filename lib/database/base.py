"""Abstract base class for mapping store implementations."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import datetime

from .models import ShortUrlMapping


class MappingStoreBase(ABC):
    """Narrow key-value contract the URL shortener service consumes.
    
    Implementations own all persisted state and must enforce uniqueness of
    ``short_code`` themselves; the service never checks before inserting.
    """
    
    name = "base"
    
    @abstractmethod
    async def insert(
        self,
        short_code: str,
        original_url: str,
        created_at: Optional[datetime] = None,
    ) -> ShortUrlMapping:
        """Insert a new mapping.
        
        Args:
            short_code: The short code to use
            original_url: The original long URL
            created_at: Optional creation timestamp (defaults to now UTC)
            
        Returns:
            The stored mapping
            
        Raises:
            CodeCollisionError: If short_code already exists
            StoreError: On any other store failure
        """
        pass
    
    @abstractmethod
    async def select_by_code(self, short_code: str) -> Optional[ShortUrlMapping]:
        """Get the mapping for a short code.
        
        Args:
            short_code: The short code to lookup
            
        Returns:
            The mapping if found, None otherwise
            
        Raises:
            StoreError: On transport failure
        """
        pass
    
    @abstractmethod
    async def delete_by_code(self, short_code: str) -> None:
        """Delete the mapping for a short code.
        
        Deleting a code that does not exist is not an error.
        
        Raises:
            StoreError: On transport failure
        """
        pass
    
    async def close(self) -> None:
        """Release connections held by the store."""
        pass
