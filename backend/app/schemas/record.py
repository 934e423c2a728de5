"""
Records API - Pydantic Request/Response Schemas
=================================================

What:  Pydantic models defining the API contract for the records endpoints.
How:   FastAPI uses these models to parse request bodies, serialize
       responses, and generate the OpenAPI document.

Request bodies are parsed but not validated beyond JSON shape: both fields
are optional and default to None, which the store receives as NULL.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class RecordCreate(BaseModel):
    """
    Body of POST /. Fields left out of the JSON arrive as None.

    Present fields must be JSON strings or null; numbers, booleans and
    objects are rejected by FastAPI with 422 before the handler runs.
    """
    name: Optional[str] = Field(default=None, description="Record name")
    description: Optional[str] = Field(default=None, description="Record description")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class RecordResponse(BaseModel):
    """
    What:  One stored record as returned by GET /.
    Note:  `id` is assigned by the store; name/description may be null if the
           record was inserted without them.
    """
    id: int = Field(description="Store-generated identifier")
    name: Optional[str] = Field(default=None, description="Record name")
    description: Optional[str] = Field(default=None, description="Record description")

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """Acknowledgement returned by POST / with HTTP 201."""
    message: str = Field(description="Human-readable success message")


class ErrorResponse(BaseModel):
    """
    What:  Body of every 500 response.
    Example:
        {"error": "Error inserting data"}
    """
    error: str = Field(description="Generic error message (details are logged server-side)")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
