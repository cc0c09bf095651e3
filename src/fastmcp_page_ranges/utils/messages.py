from __future__ import annotations

from typing import Any, Dict


ACCEPTED_SHAPES = "[n] or [n1-n2] or [-n] or [n-]"

MESSAGES: Dict[str, str] = {
    "invalid_number": "Invalid number: {0}.",
    "ambiguous_range": "Ambiguous page range definition: {0}. Use following formats: {1}",
    "invalid_range": "Invalid range: {0}.",
    "page_out_of_bounds": "Page {0} is out of bounds (1..{1})",
}


def format_error(kind: str, *args: Any) -> str:
    """Render the message template registered for ``kind``.

    Unknown kinds fall back to the kind name followed by its arguments, so a
    caller always gets something printable.
    """
    template = MESSAGES.get(kind)
    if template is None:
        return ": ".join([kind, *(str(a) for a in args)]) if args else kind
    return template.format(*args)
