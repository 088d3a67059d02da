"""Tests for short code generation."""

import random

import pytest
from lib.shortcode import ShortCodeGenerator


class TestShortCodeGenerator:
    """Test short code generation."""
    
    def test_generate_random(self):
        """Default codes are six alphanumeric characters."""
        generator = ShortCodeGenerator()
        
        code = generator.generate_random()
        assert len(code) == 6
        assert set(code) <= set(ShortCodeGenerator.BASE62_CHARS)
    
    def test_generate_random_custom_length(self):
        """Test random code with custom length."""
        generator = ShortCodeGenerator(default_length=6)
        
        code = generator.generate_random(length=10)
        assert len(code) == 10
        assert set(code) <= set(ShortCodeGenerator.BASE62_CHARS)
    
    def test_alphabet_is_base62(self):
        assert len(ShortCodeGenerator.BASE62_CHARS) == 62
        assert len(set(ShortCodeGenerator.BASE62_CHARS)) == 62
    
    def test_only_alphabet_characters(self):
        generator = ShortCodeGenerator(default_length=8)
        
        for _ in range(200):
            code = generator.generate_random()
            assert all(c in ShortCodeGenerator.BASE62_CHARS for c in code)
    
    def test_seeded_rng_is_deterministic(self):
        """Same seed, same sequence of codes."""
        first = ShortCodeGenerator(rng=random.Random(42))
        second = ShortCodeGenerator(rng=random.Random(42))
        
        assert [first.generate_random() for _ in range(5)] == [
            second.generate_random() for _ in range(5)
        ]
    
    def test_codes_vary(self):
        generator = ShortCodeGenerator(rng=random.Random(7))
        
        codes = {generator.generate_random() for _ in range(100)}
        assert len(codes) > 95
    
    def test_invalid_default_length(self):
        with pytest.raises(ValueError):
            ShortCodeGenerator(default_length=0)
