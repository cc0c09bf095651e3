"""Collapse page ranges into their canonical form.

The canonical form of a selection is sorted, has no overlapping or adjacent
intervals and holds at most one unbounded interval, which is always last.
Pages are tracked as merged ``(start, end)`` runs instead of one entry per
page, so wide ranges cost no more than narrow ones.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..models import PageRange


Run = Tuple[int, int]


def _lowest_unbounded_start(ranges: Iterable[PageRange]) -> Optional[int]:
    starts = [r.start for r in ranges if r.is_unbounded]
    return min(starts) if starts else None


def _covered_runs(ranges: Iterable[PageRange], unbound_start: Optional[int]) -> List[Run]:
    """Merge the bounded ranges below ``unbound_start`` into consecutive runs.

    Pages at or above ``unbound_start`` are already covered by the unbounded
    range and are left out.
    """
    spans: List[Run] = []
    for r in ranges:
        if r.is_unbounded:
            continue
        end = r.end
        if unbound_start is not None:
            if r.start >= unbound_start:
                continue
            end = min(end, unbound_start - 1)
        spans.append((r.start, end))
    spans.sort()

    runs: List[Run] = []
    for start, end in spans:
        if runs and start <= runs[-1][1] + 1:
            last_start, last_end = runs[-1]
            runs[-1] = (last_start, max(last_end, end))
        else:
            runs.append((start, end))
    return runs


def _expand_downward(unbound_start: int, runs: List[Run]) -> Tuple[int, List[Run]]:
    """Let the unbounded range swallow the run that ends right below it."""
    if runs and runs[-1][1] == unbound_start - 1:
        return runs[-1][0], runs[:-1]
    return unbound_start, runs


def normalize_page_ranges(ranges: Iterable[PageRange]) -> List[PageRange]:
    """Return the canonical form of ``ranges`` in ascending start order.

    The input is only read; callers can keep using it afterwards.
    """
    ranges = list(ranges)
    if not ranges:
        return []

    unbound_start = _lowest_unbounded_start(ranges)
    runs = _covered_runs(ranges, unbound_start)
    if unbound_start is not None:
        unbound_start, runs = _expand_downward(unbound_start, runs)

    normalized = [PageRange(start=start, end=end) for start, end in runs]
    if unbound_start is not None:
        normalized.append(PageRange.unbounded(unbound_start))
    return normalized
