"""Page window planning for offset-paginated endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from core.errors import InvalidArgumentError

MAX_SAFE_INTEGER = 2**53 - 1


@dataclass(frozen=True)
class PageWindow:
    """One `(startAt, maxResults)` slice of a paginated result set."""

    start_at: int
    page_size: int


def _is_safe_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and abs(value) <= MAX_SAFE_INTEGER


def plan_page_windows(page_size: int, total: int) -> list[PageWindow]:
    """Split `total` items into consecutive windows of at most `page_size`.

    The windows tile ``[0, total)`` without gaps or overlaps; only the last
    one may be shorter. ``total == 0`` yields no windows.
    """

    if not _is_safe_int(page_size) or page_size <= 0:
        raise InvalidArgumentError(
            "Option 'page_size' needs to be a positive safe integer.",
            context={"page_size": page_size},
        )
    if not _is_safe_int(total) or total < 0:
        raise InvalidArgumentError(
            "Option 'total' needs to be a non-negative safe integer.",
            context={"total": total},
        )

    page_count = -(-total // page_size)
    last_page_size = total - page_size * (page_count - 1)

    return [
        PageWindow(
            start_at=index * page_size,
            page_size=last_page_size if index == page_count - 1 else page_size,
        )
        for index in range(page_count)
    ]
