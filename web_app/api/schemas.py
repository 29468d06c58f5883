"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import List
from datetime import datetime


class LinkRequest(BaseModel):
    """Request to create or overwrite a link."""
    
    shortcut: str = Field(..., description="The shortcut key")
    url: str = Field(..., description="Destination URL; http:// is added if no scheme is given")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shortcut": "gh",
                    "url": "https://github.com"
                },
                {
                    "shortcut": "docs",
                    "url": "docs.python.org/3/"
                }
            ]
        }
    }


class LinkResponse(BaseModel):
    """A single link."""
    
    shortcut: str = Field(..., description="The shortcut key")
    url: str = Field(..., description="The normalized destination URL")


class LinkListResponse(BaseModel):
    """Every stored link, sorted by shortcut."""
    
    links: List[LinkResponse]
    count: int


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Overall status")
    storage: str = Field(..., description="Storage status")
    link_count: int = Field(..., description="Number of stored links")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""
    
    detail: str = Field(..., description="Error message")
