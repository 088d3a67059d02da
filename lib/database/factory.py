"""Build the configured mapping store."""

import logging
from typing import Optional

from .base import MappingStoreBase
from .memory import InMemoryMappingStore
from .postgres import PostgresMappingStore
from .supabase import SupabaseMappingStore


def create_store(config, logger: Optional[logging.Logger] = None) -> MappingStoreBase:
    """Create the store selected by ``config.store_backend``.
    
    Args:
        config: Configuration instance
        logger: Optional logger
        
    Returns:
        Mapping store instance
    """
    backend = config.store_backend
    
    if backend == "postgres":
        return PostgresMappingStore(
            dsn=config.database_url,
            create_tables=config.database_create_tables,
            logger=logger,
        )
    
    if backend == "supabase":
        return SupabaseMappingStore(
            supabase_url=config.supabase_url,
            supabase_key=config.supabase_key.get_secret_value(),
            logger=logger,
        )
    
    if backend == "memory":
        return InMemoryMappingStore(logger=logger)
    
    raise ValueError(f"Unknown store backend: {backend}")
