"""Tests for pagination rules — page-size clamping and page metadata, no IO."""

import json
import math

import pytest

from app.core.domain_types import MAX_CITIES_PAGE_SIZE
from app.core.pagination import PaginationMetadata, clamp_page_size, page_offset


@pytest.mark.parametrize("requested", [21, 50, 1000])
def test_oversized_page_size_clamps_to_maximum(requested):
    assert clamp_page_size(requested) == MAX_CITIES_PAGE_SIZE == 20


@pytest.mark.parametrize("requested", [1, 10, 20])
def test_page_size_within_limit_passes_through(requested):
    assert clamp_page_size(requested) == requested


def test_clamp_accepts_custom_maximum():
    assert clamp_page_size(8, maximum=5) == 5


def test_page_offset_is_zero_for_first_page():
    assert page_offset(1, 10) == 0


def test_page_offset_skips_previous_pages():
    assert page_offset(3, 20) == 40


@pytest.mark.parametrize("page_number", [0, -1])
def test_page_offset_is_none_for_non_positive_pages(page_number):
    assert page_offset(page_number, 10) is None


@pytest.mark.parametrize(
    ("total", "size"), [(0, 10), (1, 10), (10, 10), (11, 10), (3, 2), (41, 20)],
)
def test_total_pages_is_ceiling_of_total_over_size(total, size):
    meta = PaginationMetadata(total_item_count=total, page_size=size, current_page=1)
    assert meta.total_pages == math.ceil(total / size)
    assert (meta.total_pages == 0) == (total == 0)


def test_current_page_echoed_even_beyond_last_page():
    meta = PaginationMetadata(total_item_count=3, page_size=2, current_page=7)
    assert meta.current_page == 7
    assert meta.total_pages == 2


def test_to_dict_uses_camel_case_keys():
    meta = PaginationMetadata(total_item_count=3, page_size=2, current_page=1)
    assert meta.to_dict() == {
        "totalItemCount": 3,
        "pageSize": 2,
        "currentPage": 1,
        "totalPages": 2,
    }


def test_to_header_is_compact_json():
    meta = PaginationMetadata(total_item_count=0, page_size=10, current_page=1)
    header = meta.to_header()
    assert " " not in header
    assert json.loads(header) == {
        "totalItemCount": 0,
        "pageSize": 10,
        "currentPage": 1,
        "totalPages": 0,
    }


def test_metadata_is_immutable():
    meta = PaginationMetadata(total_item_count=1, page_size=1, current_page=1)
    with pytest.raises(AttributeError):
        meta.page_size = 5
