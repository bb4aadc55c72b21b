from math import ceil
from typing import Literal, Tuple

from football_backend.core.config import settings

SortOrder = Literal["asc", "desc"]


def sanitize_pagination(page: int, per_page: int) -> Tuple[int, int]:
    """Clamp page/per_page: page >= 1, per_page defaults when < 1 and is capped at max_per_page."""
    if page < 1:
        page = 1
    if per_page < 1:
        per_page = settings.default_per_page
    if per_page > settings.max_per_page:
        per_page = settings.max_per_page
    return page, per_page


def page_offset(page: int, per_page: int) -> int:
    return (page - 1) * per_page


def page_meta(page: int, per_page: int, total: int) -> dict:
    return {
        "page": page,
        "per_page": per_page,
        "total": total,
        "total_pages": ceil(total / per_page) if per_page else 0,
    }
