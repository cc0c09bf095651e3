from fastmcp import FastMCP  # type: ignore

from ..config import settings
from ..utils.messages import ACCEPTED_SHAPES
from ..utils.telemetry import instrument_tool


def register(app: FastMCP) -> None:
    @app.tool()
    @instrument_tool("server_info")
    async def server_info() -> dict:
        """Return basic server info and configuration snapshot (non-secret)."""
        return {
            "name": settings.server_name,
            "version": settings.server_version,
            "max_file_size_mb": settings.max_file_size_mb,
            "max_page_number": settings.max_page_number,
            "max_resolved_pages": settings.max_resolved_pages,
            "selection_formats": ACCEPTED_SHAPES,
            "log_file": str(settings.log_path),
        }
