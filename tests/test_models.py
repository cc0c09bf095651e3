import pytest
from pydantic import ValidationError

from fastmcp_page_ranges.models import PageRange


def test_str_renders_selection_tokens():
    assert str(PageRange.single(5)) == "5"
    assert str(PageRange(start=2, end=4)) == "2-4"
    assert str(PageRange.unbounded(10)) == "10-"


def test_value_semantics():
    assert PageRange(start=1, end=3) == PageRange(start=1, end=3)
    assert PageRange.unbounded(3) != PageRange(start=3, end=3)
    assert len({PageRange(start=1, end=3), PageRange(start=1, end=3)}) == 1


def test_frozen():
    r = PageRange(start=1, end=3)
    with pytest.raises(ValidationError):
        r.start = 2


@pytest.mark.parametrize("kwargs", [{"start": 0, "end": 3}, {"start": -1}, {"start": 5, "end": 4}])
def test_invalid_bounds(kwargs):
    with pytest.raises(ValueError):
        PageRange(**kwargs)
