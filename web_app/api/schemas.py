"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ShortenRequest(BaseModel):
    """Request to shorten a URL.
    
    Both fields are optional at the schema level; the service reports a
    missing url so the API and UI share one message.
    """
    
    url: Optional[str] = Field(None, description="The URL to shorten")
    custom_code: Optional[str] = Field(None, description="Optional custom short code; omit for a random one")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "url": "https://example.com/very/long/url",
                    "custom_code": "mylink"
                },
                {
                    "url": "https://example.com/very/long/url"
                }
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""
    
    success: bool = Field(True, description="Always true on success")
    short_code: str = Field(..., description="The accepted short code")
    short_url: str = Field(..., description="The complete short URL")
    original_url: str = Field(..., description="The original long URL")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "success": True,
                    "short_code": "mylink",
                    "short_url": "https://short.link/mylink",
                    "original_url": "https://example.com/very/long/url"
                }
            ]
        }
    }


class URLInfoResponse(BaseModel):
    """Stored mapping for a short code."""
    
    id: Optional[str] = None
    short_code: str
    original_url: str
    created_at: datetime


class DeleteResponse(BaseModel):
    """Response after deleting a short URL."""
    
    success: bool = True
    message: str = "Short URL deleted"


class ErrorResponse(BaseModel):
    """Error response."""
    
    error: str = Field(..., description="Error message")
