"""
Stockroom Backend — Pydantic Response Schemas
===============================================

What:  Pydantic models defining what the inventory endpoints return.
Why:   The list projection must never carry `description`; a dedicated schema
       makes that structural instead of a convention.
Who:   Built by InventoryService, serialized by the JSON renderer and
       unpacked into template context by the HTML renderer.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class InventoryListItem(BaseModel):
    """
    What:  Row projection used by GET /stuff.
    Why:   Only id, item and quantity; descriptions belong to the detail page.
    """
    id: int = Field(description="Primary key of the stuff row")
    item: str = Field(description="Item name")
    quantity: int = Field(description="Units on hand")

    model_config = {"from_attributes": True}


class InventoryItemDetail(InventoryListItem):
    """Full row returned by GET /stuff/item/{id}."""
    description: Optional[str] = Field(default=None, description="Free-text description")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  JSON error body for 500 responses.

    Example:
        {
            "error": "query_error",
            "message": "(sqlite3.OperationalError) no such table: stuff",
            "request_id": "1f0c2a9b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Error detail")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
