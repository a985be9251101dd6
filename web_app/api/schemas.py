"""Pydantic schemas for API responses."""

from pydantic import BaseModel, Field
from datetime import datetime


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    storage: str = Field(..., description="Storage backend status")
    backend: str = Field(..., description="Configured storage backend")
    timestamp: datetime = Field(..., description="Check timestamp")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "storage": "healthy",
                    "backend": "redis",
                    "timestamp": "2024-01-01T12:00:00Z"
                }
            ]
        }
    }
