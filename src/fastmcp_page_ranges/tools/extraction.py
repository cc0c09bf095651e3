from fastmcp import FastMCP  # type: ignore

from ..services import pdf_processor
from ..utils.telemetry import instrument_tool


def register(app: FastMCP) -> None:
    @app.tool()
    @instrument_tool("get_page_count")
    async def get_page_count(file_path: str) -> dict:
        """Return the number of pages in a PDF."""
        return {"file_path": file_path, "page_count": pdf_processor.page_count(file_path)}

    @app.tool()
    @instrument_tool("extract_pages")
    async def extract_pages(file_path: str, selection: str, output_path: str) -> dict:
        """Write the pages named by a selection like "1-3,8-" to a new PDF."""
        res = pdf_processor.extract_pages(file_path, selection, output_path)
        return {
            "output_path": res.output_path,
            "pages": res.pages,
            "page_count": res.page_count,
            "output_size": res.output_size,
        }
