"""Schemas shared by the directory routes: list metadata and bulk status."""

from pydantic import BaseModel, Field


class PageMeta(BaseModel):
    """Pagination metadata; list responses extend this with items."""

    total: int
    page: int
    limit: int
    total_pages: int


class BulkStatusRequest(BaseModel):
    """Request body for PATCH /bulk/status. An empty ids list is rejected with 400."""

    ids: list[str] = Field(..., max_length=1000)
    is_active: bool


class BulkStatusResponse(BaseModel):
    success: bool
    updated_count: int
