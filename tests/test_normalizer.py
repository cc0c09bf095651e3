import itertools
import random

from fastmcp_page_ranges.models import PageRange
from fastmcp_page_ranges.services.normalizer import normalize_page_ranges


SAMPLE_LIMIT = 80


def pages_of(ranges, limit=SAMPLE_LIMIT):
    pages = set()
    for r in ranges:
        end = limit if r.end is None else min(r.end, limit)
        pages.update(range(r.start, end + 1))
    return pages


def random_ranges(rng):
    ranges = []
    for _ in range(rng.randint(1, 7)):
        start = rng.randint(1, 60)
        if rng.random() < 0.2:
            ranges.append(PageRange.unbounded(start))
        else:
            ranges.append(PageRange(start=start, end=start + rng.randint(0, 12)))
    return ranges


def assert_canonical(ranges):
    unbounded = [r for r in ranges if r.is_unbounded]
    assert len(unbounded) <= 1
    if unbounded:
        assert ranges[-1] is unbounded[0]
    for prev, cur in zip(ranges, ranges[1:]):
        # sorted, no overlap and no adjacency
        assert prev.end is not None
        assert cur.start > prev.end + 1


def test_empty():
    assert normalize_page_ranges([]) == []
    assert normalize_page_ranges(set()) == []


def test_duplicates_collapse():
    r = PageRange(start=2, end=4)
    assert normalize_page_ranges([r, r, PageRange(start=2, end=4)]) == [r]


def test_nested_ranges_disappear():
    ranges = [PageRange(start=1, end=20), PageRange(start=5, end=6), PageRange.single(20)]
    assert normalize_page_ranges(ranges) == [PageRange(start=1, end=20)]


def test_bounded_above_unbounded_start_is_subsumed():
    ranges = [PageRange.unbounded(10), PageRange(start=12, end=30), PageRange.unbounded(15)]
    assert normalize_page_ranges(ranges) == [PageRange.unbounded(10)]


def test_unbounded_expands_down_to_first_gap():
    ranges = [PageRange.single(2), PageRange(start=4, end=6), PageRange.single(7), PageRange.unbounded(8)]
    assert normalize_page_ranges(ranges) == [PageRange.single(2), PageRange.unbounded(4)]


def test_unbounded_expands_down_to_page_one():
    ranges = [PageRange(start=1, end=3), PageRange.unbounded(4)]
    assert normalize_page_ranges(ranges) == [PageRange.unbounded(1)]


def test_bounded_range_straddling_unbounded_start():
    ranges = [PageRange(start=5, end=40), PageRange.unbounded(30), PageRange.single(2)]
    assert normalize_page_ranges(ranges) == [PageRange.single(2), PageRange.unbounded(5)]


def test_wide_ranges_are_cheap():
    ranges = [PageRange(start=1, end=2_000_000_000), PageRange(start=5, end=2_000_000_001)]
    assert normalize_page_ranges(ranges) == [PageRange(start=1, end=2_000_000_001)]


def test_does_not_mutate_input():
    ranges = {PageRange(start=3, end=5), PageRange(start=4, end=9), PageRange.unbounded(10)}
    snapshot = set(ranges)
    normalize_page_ranges(ranges)
    assert ranges == snapshot


def test_accepts_generator():
    gen = (PageRange.single(p) for p in (3, 1, 2))
    assert normalize_page_ranges(gen) == [PageRange(start=1, end=3)]


def test_properties_on_random_samples():
    rng = random.Random(20161622)
    for _ in range(300):
        ranges = random_ranges(rng)
        normalized = normalize_page_ranges(ranges)

        assert_canonical(normalized)
        assert normalize_page_ranges(normalized) == normalized
        assert pages_of(normalized) == pages_of(ranges)
        shuffled = list(ranges)
        rng.shuffle(shuffled)
        assert normalize_page_ranges(shuffled) == normalized


def test_all_permutations_agree():
    ranges = [
        PageRange(start=3, end=6),
        PageRange.single(1),
        PageRange.unbounded(9),
        PageRange.single(8),
        PageRange.unbounded(12),
    ]
    results = {tuple(normalize_page_ranges(p)) for p in itertools.permutations(ranges)}
    assert results == {(PageRange.single(1), PageRange(start=3, end=6), PageRange.unbounded(8))}
