"""Pytest configuration and fixtures."""

import random
from typing import AsyncGenerator, Iterable, List, Optional

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from lib.database.memory import InMemoryMappingStore
from lib.errors import CodeCollisionError, StoreError
from lib.service import URLShortenerService
from lib.shortcode import ShortCodeGenerator
from lib.common.logging_config import setup_logging
from web_app import create_app


UI_USER = "admin"
UI_PASS = "s3cret-pass"
API_SECRET = "api-secret-123"


class RecordingStore(InMemoryMappingStore):
    """In-memory store that records insert attempts and can be scripted to fail.
    
    ``collisions`` forces the next N inserts to report a uniqueness violation;
    ``failure`` makes every insert raise a non-uniqueness StoreError.
    """
    
    def __init__(self, collisions: int = 0, failure: Optional[str] = None):
        super().__init__()
        self.collisions = collisions
        self.failure = failure
        self.insert_attempts: List[str] = []
    
    async def insert(self, short_code, original_url, created_at=None):
        self.insert_attempts.append(short_code)
        if self.failure:
            raise StoreError(self.failure)
        if self.collisions > 0:
            self.collisions -= 1
            raise CodeCollisionError(short_code)
        return await super().insert(short_code, original_url, created_at)


class SequenceGenerator(ShortCodeGenerator):
    """Generator that hands out a fixed sequence of codes."""
    
    def __init__(self, codes: Iterable[str]):
        super().__init__(default_length=6)
        self._codes = iter(codes)
    
    def generate_random(self, length=None) -> str:
        return next(self._codes)


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store() -> RecordingStore:
    """Empty recording store."""
    return RecordingStore()


@pytest.fixture
def short_code_generator():
    """Create seeded short code generator."""
    return ShortCodeGenerator(default_length=6, rng=random.Random(1234))


@pytest.fixture
def service(store, short_code_generator, logger) -> URLShortenerService:
    """Create service instance."""
    return URLShortenerService(
        store=store,
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def config() -> Config:
    """Configuration with known test credentials."""
    return Config(
        basic_auth_user=UI_USER,
        basic_auth_pass=UI_PASS,
        api_secret=API_SECRET,
        store_backend="memory",
        base_url="http://testserver",
    )


@pytest.fixture
def app(store, service, config, logger):
    """Create test FastAPI app."""
    return create_app(
        store_instance=store,
        service_instance=service,
        config=config,
        logger=logger,
    )


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def api_headers():
    """Headers carrying the correct API key."""
    return {"X-API-Key": API_SECRET}


@pytest.fixture
def ui_auth():
    """Correct Basic Auth credentials for the UI."""
    return (UI_USER, UI_PASS)


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
