"""Pagination — page-size clamping and page metadata for list endpoints.

Invariants:
    - Effective page size never exceeds MAX_CITIES_PAGE_SIZE (oversized requests clamp, never fail)
    - total_pages == ceil(total_item_count / page_size); 0 iff total_item_count == 0
    - Metadata is derived from the repository's total count, never from the page length
    - current_page is echoed as requested (no range validation)

Design Decisions:
    - Frozen dataclass over pydantic model: pure value object, no validation needed in core
    - to_header() serializes with camelCase keys so the header matches the JSON body convention
"""

import json
from dataclasses import dataclass

from app.core.domain_types import MAX_CITIES_PAGE_SIZE


def clamp_page_size(page_size: int, maximum: int = MAX_CITIES_PAGE_SIZE) -> int:
    """Reduce an oversized page size to the maximum. Smaller values pass through."""
    return min(page_size, maximum)


def page_offset(page_number: int, page_size: int) -> int | None:
    """Row offset for a 1-based page, or None when the page cannot hold rows."""
    if page_number < 1:
        return None
    return (page_number - 1) * page_size


@dataclass(frozen=True)
class PaginationMetadata:
    """Position of one page within the full matching set."""
    total_item_count: int
    page_size: int
    current_page: int

    @property
    def total_pages(self) -> int:
        # ceiling division without floats
        return -(-self.total_item_count // self.page_size)

    def to_dict(self) -> dict:
        return {
            "totalItemCount": self.total_item_count,
            "pageSize": self.page_size,
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
        }

    def to_header(self) -> str:
        """Serialize for the X-Pagination response header."""
        return json.dumps(self.to_dict(), separators=(",", ":"))
