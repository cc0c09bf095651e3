from __future__ import annotations

from typing import Any

from .config import settings
from .utils.logger import get_logger

logger = get_logger(__name__)


def build_app() -> Any:
    try:
        from fastmcp import FastMCP  # type: ignore
    except Exception as exc:  # pragma: no cover
        raise SystemExit(
            "fastmcp is not installed. Please install dependencies first."
        ) from exc

    app = FastMCP(settings.server_name, version=settings.server_version)

    from .tools import extraction, selection, utilities

    utilities.register(app)
    selection.register(app)
    extraction.register(app)

    logger.info("registered tools for %s %s", settings.server_name, settings.server_version)
    return app


def run() -> None:
    app = build_app()
    if hasattr(app, "run_stdio"):
        app.run_stdio()
    elif hasattr(app, "run"):
        app.run()
    else:  # pragma: no cover
        logger.error("FastMCP app has no run or run_stdio method")
        raise SystemExit("Unsupported FastMCP version: missing run entrypoint")


if __name__ == "__main__":  # pragma: no cover
    run()
