"""Mapping store layer for URL shortener."""

from .base import MappingStoreBase
from .memory import InMemoryMappingStore
from .models import ShortUrlMapping
from .postgres import PostgresMappingStore
from .supabase import SupabaseMappingStore
from .factory import create_store

__all__ = [
    "MappingStoreBase",
    "InMemoryMappingStore",
    "PostgresMappingStore",
    "SupabaseMappingStore",
    "ShortUrlMapping",
    "create_store",
]
