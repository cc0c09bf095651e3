from typing import Any, Dict, List

from fastmcp import FastMCP  # type: ignore

from ..models import PageRange
from ..services import normalizer, selection
from ..utils.parsers import parse_page_selection as parse_selection
from ..utils.telemetry import instrument_tool


def register(app: FastMCP) -> None:
    @app.tool()
    @instrument_tool("parse_page_selection")
    async def parse_page_selection(selection_text: str) -> dict:
        """Parse a page selection such as "2-4,10-" into canonical page ranges.

        Accepted token shapes, comma separated: n, n1-n2, -n (pages 1..n) and
        n- (page n to the end of the document). An empty selection yields no
        ranges.
        """
        return selection.describe_ranges(parse_selection(selection_text))

    @app.tool()
    @instrument_tool("normalize_page_ranges")
    async def normalize_page_ranges(ranges: List[Dict[str, Any]]) -> dict:
        """Merge page ranges given as {"start": n, "end": m} items.

        Omit "end" (or pass null) for a range that runs to the end of the
        document.
        """
        parsed = [PageRange.model_validate(item) for item in ranges]
        return selection.describe_ranges(normalizer.normalize_page_ranges(parsed))

    @app.tool()
    @instrument_tool("resolve_page_selection")
    async def resolve_page_selection(selection_text: str, page_count: int) -> dict:
        """List the concrete page numbers a selection picks in a document of page_count pages."""
        pages = selection.resolve_selection(selection_text, page_count)
        return {"pages": pages, "count": len(pages), "page_count": page_count}
