"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CityId, PointOfInterestId wrap database-assigned ints — opaque to query logic
    - MAX_CITIES_PAGE_SIZE is the single upper bound for list page sizes

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CityId = NewType("CityId", int)
PointOfInterestId = NewType("PointOfInterestId", int)


# ─── Limits ──────────────────────────────────────────────────────

MAX_CITIES_PAGE_SIZE = 20
DEFAULT_CITIES_PAGE_SIZE = 10
