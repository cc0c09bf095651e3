from __future__ import annotations

import functools
import time
import uuid
from typing import Any, Callable, Coroutine

from ..errors import PageSelectionError
from .logger import get_logger


logger = get_logger(__name__)

ToolFn = Callable[..., Coroutine[Any, Any, Any]]


def _shorten(value: Any) -> Any:
    s = str(value)
    if len(s) > 200:
        return s[:200] + "…"
    return s


def _describe_kwargs(kwargs: dict) -> dict:
    return {k: _shorten(v) for k, v in kwargs.items()}


def _attach_meta(result: Any, op_id: str, duration_ms: int) -> Any:
    meta = {"operation_id": op_id, "execution_ms": duration_ms}
    if isinstance(result, dict):
        if "meta" in result and isinstance(result["meta"], dict):
            result["meta"].update(meta)
        else:
            result["meta"] = meta
        return result
    if isinstance(result, list):
        return {"items": result, "meta": meta}
    return {"result": result, "meta": meta}


def instrument_tool(name: str) -> Callable[[ToolFn], ToolFn]:
    """Log start/end of a tool call, time it and attach a ``meta`` block.

    Selection errors are re-raised as ``ValueError`` with their kind in the
    text so MCP clients can tell them apart from other failures.
    """

    def decorator(fn: ToolFn) -> ToolFn:
        @functools.wraps(fn)
        async def wrapper(*args, **kwargs):
            op_id = uuid.uuid4().hex
            start = time.perf_counter()
            logger.info("op_start name=%s id=%s kwargs=%s", name, op_id, _describe_kwargs(kwargs))
            try:
                result = await fn(*args, **kwargs)
            except PageSelectionError as e:
                duration_ms = int((time.perf_counter() - start) * 1000)
                logger.warning("op_rejected name=%s id=%s ms=%d kind=%s text=%r", name, op_id, duration_ms, e.kind, e.text)
                raise ValueError(f"{name} failed [{e.kind}]: {e.message}") from e
            except Exception as e:  # noqa: BLE001
                duration_ms = int((time.perf_counter() - start) * 1000)
                logger.error("op_error name=%s id=%s ms=%d error=%s", name, op_id, duration_ms, e)
                raise ValueError(f"{name} failed: {e}") from e
            duration_ms = int((time.perf_counter() - start) * 1000)
            logger.info("op_end name=%s id=%s ms=%d", name, op_id, duration_ms)
            return _attach_meta(result, op_id, duration_ms)

        return wrapper

    return decorator
