from __future__ import annotations

import re
from typing import List, Optional

from ..config import settings
from ..errors import AmbiguousRangeError, InvalidNumberError, InvalidRangeError
from ..models import PageRange
from ..services.normalizer import normalize_page_ranges


_PAGE_NUMBER = re.compile(r"\+?[0-9]+")


def parse_page_number(value: str) -> int:
    text = value.strip()
    if not _PAGE_NUMBER.fullmatch(text):
        raise InvalidNumberError(value)
    number = int(text)
    if number < 1 or number > settings.max_page_number:
        raise InvalidNumberError(value)
    return number


def parse_page_token(token: str) -> PageRange:
    """Parse one comma separated token: ``n``, ``n1-n2``, ``-n`` or ``n-``.

    Empty dash separated parts are dropped, so ``"1--3"`` reads as ``1-3``.
    """
    token = token.strip()
    limits = [part.strip() for part in token.split("-") if part.strip()]
    if len(limits) > 2:
        raise AmbiguousRangeError(token)
    if not limits:
        raise InvalidNumberError(token)
    if len(limits) == 1:
        number = parse_page_number(limits[0])
        if token.endswith("-"):
            return PageRange.unbounded(number)
        if token.startswith("-"):
            return PageRange(start=1, end=number)
        return PageRange.single(number)

    start = parse_page_number(limits[0])
    end = parse_page_number(limits[1])
    if end < start:
        raise InvalidRangeError(token)
    return PageRange(start=start, end=end)


def parse_page_selection(selection: Optional[str]) -> List[PageRange]:
    """Parse a selection like ``"2-4,10-"`` into normalized page ranges.

    Blank input selects nothing. The first invalid token aborts the whole
    parse.
    """
    if not selection or not selection.strip():
        return []
    ranges: List[PageRange] = []
    for part in selection.split(","):
        part = part.strip()
        if not part:
            continue
        ranges.append(parse_page_token(part))
    return normalize_page_ranges(ranges)
