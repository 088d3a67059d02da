"""Tests for common utilities."""

import json
import logging

from lib.common.validators import is_valid_url, is_valid_short_code
from lib.common.headers import extract_forwarded_headers, build_base_url, build_short_url
from lib.common.logging_config import JsonFormatter, setup_logging


class TestValidators:
    """Test validation utilities."""
    
    def test_valid_urls(self):
        """Any non-empty URL is accepted."""
        assert is_valid_url("https://example.com")[0]
        assert is_valid_url("ftp://example.com")[0]
        assert is_valid_url("not-a-url")[0]
    
    def test_missing_urls(self):
        valid, error = is_valid_url("")
        assert not valid
        assert error == "url is required"
        
        assert not is_valid_url(None)[0]
        assert not is_valid_url("  ")[0]
    
    def test_valid_short_codes(self):
        """Test valid short code validation."""
        assert is_valid_short_code("abc123")[0]
        assert is_valid_short_code("A")[0]
        assert is_valid_short_code("x" * 64)[0]
    
    def test_invalid_short_codes(self):
        """Test invalid short code validation."""
        valid, error = is_valid_short_code("x" * 65)
        assert not valid
        assert "at most" in error.lower()
        
        valid, error = is_valid_short_code("test-code")
        assert not valid
        assert "letters and numbers" in error
        
        assert not is_valid_short_code("abc@123")[0]
        assert not is_valid_short_code("")[0]
    
    def test_reserved_short_codes(self):
        valid, error = is_valid_short_code("short")
        assert not valid
        assert "reserved" in error.lower()
        
        # Routing is case-sensitive, so only the exact path is reserved
        assert is_valid_short_code("Short")[0]


class TestHeaders:
    """Test header utilities."""
    
    def test_extract_forwarded_headers(self):
        """Test forwarded header extraction."""
        headers = {
            "X-Forwarded-Proto": "https",
            "X-Forwarded-Host": "example.com",
            "X-Forwarded-For": "1.2.3.4",
        }
        
        result = extract_forwarded_headers(headers)
        assert result["forwarded_proto"] == "https"
        assert result["forwarded_host"] == "example.com"
        assert result["forwarded_for"] == "1.2.3.4"
    
    def test_build_base_url_from_headers(self):
        """Test base URL building from headers."""
        headers = {
            "X-Forwarded-Proto": "https",
            "X-Forwarded-Host": "example.com",
        }
        
        base_url = build_base_url(
            headers=headers,
            fallback_base_url="http://localhost:9200",
            request_scheme="http",
            request_host="internal:9200",
        )
        
        assert base_url == "https://example.com"
    
    def test_build_base_url_first_forwarded_hop(self):
        headers = {
            "x-forwarded-proto": "https, http",
            "x-forwarded-host": "sho.rt, proxy.local",
        }
        
        assert build_base_url(headers, "http://localhost:9200") == "https://sho.rt"
    
    def test_build_base_url_from_request(self):
        base_url = build_base_url(
            headers={},
            fallback_base_url="http://localhost:9200",
            request_scheme="https",
            request_host="links.example.org",
        )
        
        assert base_url == "https://links.example.org"
    
    def test_build_base_url_fallback(self):
        """Test base URL fallback."""
        base_url = build_base_url(
            headers={},
            fallback_base_url="http://localhost:9200/"
        )
        
        assert base_url == "http://localhost:9200"


class TestShortLinks:
    """Test short link assembly."""
    
    def test_trailing_slash_on_origin(self):
        url = build_short_url(short_code="abc123", base_url="https://example.com/")
        
        assert url == "https://example.com/abc123"
    
    def test_origin_with_port(self):
        url = build_short_url(short_code="Zz9", base_url="http://localhost:9200")
        
        assert url == "http://localhost:9200/Zz9"


class TestLogging:
    """Logging setup."""
    
    def test_setup_logging_replaces_handlers(self):
        setup_logging(level="DEBUG")
        logger = setup_logging(level="WARNING")
        
        assert logger.name == "url_shortener"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
    
    def test_json_formatter_escapes_message(self):
        record = logging.LogRecord(
            "url_shortener", logging.INFO, __file__, 1, 'said "hi"', None, None
        )
        
        entry = json.loads(JsonFormatter().format(record))
        
        assert entry["message"] == 'said "hi"'
        assert entry["level"] == "INFO"
