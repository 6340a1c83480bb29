"""Common schemas used across multiple API endpoints."""

from pydantic import BaseModel, Field


class PaginatedMeta(BaseModel):
    """Pagination metadata for list responses.

    Attributes:
        page: Current page number.
        page_size: Items per page.
        total_count: Total items available.
        total_pages: Total number of pages.
    """

    page: int = Field(..., description="Current page number")
    page_size: int = Field(..., description="Items per page")
    total_count: int = Field(..., description="Total items available")
    total_pages: int = Field(..., description="Total number of pages")

    @classmethod
    def from_pagination(
        cls, page: int, page_size: int, total_count: int
    ) -> "PaginatedMeta":
        """Create pagination metadata from parameters.

        Args:
            page: Current page number.
            page_size: Items per page.
            total_count: Total items available.

        Returns:
            PaginatedMeta instance.
        """
        total_pages = (total_count + page_size - 1) // page_size if page_size > 0 else 0
        return cls(
            page=page,
            page_size=page_size,
            total_count=total_count,
            total_pages=total_pages,
        )
