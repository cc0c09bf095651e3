from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator


class PageRange(BaseModel):
    """A 1-based inclusive page interval.

    ``end`` is ``None`` for an unbounded interval, one that runs from ``start``
    to the last page of whatever document it is eventually applied to.
    """

    model_config = ConfigDict(frozen=True)

    start: int
    end: Optional[int] = None

    @model_validator(mode="after")
    def _check_bounds(self) -> "PageRange":
        if self.start < 1:
            raise ValueError(f"Page range start must be >= 1, got {self.start}")
        if self.end is not None and self.end < self.start:
            raise ValueError(f"Page range end ({self.end}) must be >= start ({self.start})")
        return self

    @classmethod
    def single(cls, page: int) -> "PageRange":
        return cls(start=page, end=page)

    @classmethod
    def unbounded(cls, start: int) -> "PageRange":
        return cls(start=start)

    @property
    def is_unbounded(self) -> bool:
        return self.end is None

    def __str__(self) -> str:
        if self.end is None:
            return f"{self.start}-"
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}-{self.end}"
