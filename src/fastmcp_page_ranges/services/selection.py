from __future__ import annotations

from typing import Iterable, List

from ..config import settings
from ..errors import PageOutOfBoundsError
from ..models import PageRange
from ..utils.parsers import parse_page_selection
from .normalizer import normalize_page_ranges


def format_page_ranges(ranges: Iterable[PageRange]) -> str:
    """Render ranges as canonical selection text, e.g. ``"2-4,10-"``."""
    return ",".join(str(r) for r in normalize_page_ranges(ranges))


def resolve_pages(ranges: Iterable[PageRange], page_count: int) -> List[int]:
    """Turn ranges into concrete 1-based page numbers of a ``page_count`` page document.

    Unbounded ranges run to the last page. Any bounded page past the end of
    the document, or an unbounded range starting past it, is an error.
    """
    if page_count < 1:
        raise ValueError(f"page_count must be >= 1, got {page_count}")
    if page_count > settings.max_resolved_pages:
        raise ValueError(
            f"page_count {page_count} exceeds the resolvable limit of {settings.max_resolved_pages} pages"
        )
    pages: List[int] = []
    for r in normalize_page_ranges(ranges):
        if r.start > page_count:
            raise PageOutOfBoundsError(r.start, page_count)
        if r.end is not None and r.end > page_count:
            raise PageOutOfBoundsError(r.end, page_count)
        end = page_count if r.end is None else r.end
        pages.extend(range(r.start, end + 1))
    return pages


def resolve_selection(selection: str, page_count: int) -> List[int]:
    return resolve_pages(parse_page_selection(selection), page_count)


def ranges_to_dicts(ranges: Iterable[PageRange]) -> List[dict]:
    return [
        {"start": r.start, "end": r.end, "unbounded": r.is_unbounded}
        for r in ranges
    ]


def describe_ranges(ranges: List[PageRange]) -> dict:
    return {"ranges": ranges_to_dicts(ranges), "canonical": format_page_ranges(ranges)}
