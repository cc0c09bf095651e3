"""Exceptions raised while parsing or resolving page selections."""

from __future__ import annotations

from typing import Any

from .utils.messages import ACCEPTED_SHAPES, format_error


class PageSelectionError(ValueError):
    """Base class for page selection failures.

    ``kind`` identifies the failure for callers that render their own text,
    ``text`` is the offending piece of input and ``message`` the default
    rendering.
    """

    kind = "page_selection"

    def __init__(self, text: str, *args: Any) -> None:
        self.text = text
        self.message_args = (text, *args)
        self.message = format_error(self.kind, *self.message_args)
        super().__init__(self.message)


class InvalidNumberError(PageSelectionError):
    """A token segment is not a valid page number."""

    kind = "invalid_number"


class AmbiguousRangeError(PageSelectionError):
    """A token has more than two dash separated parts."""

    kind = "ambiguous_range"

    def __init__(self, token: str) -> None:
        super().__init__(token, ACCEPTED_SHAPES)


class InvalidRangeError(PageSelectionError):
    """An explicit ``n1-n2`` token has ``n2 < n1``."""

    kind = "invalid_range"


class PageOutOfBoundsError(PageSelectionError):
    kind = "page_out_of_bounds"

    def __init__(self, page: int, page_count: int) -> None:
        self.page = page
        self.page_count = page_count
        super().__init__(str(page), page_count)
