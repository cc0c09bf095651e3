from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from PyPDF2 import PdfReader, PdfWriter

from ..utils.validators import assert_output_differs, validate_pdf
from .selection import resolve_selection


@dataclass
class ExtractionResult:
    output_path: str
    pages: List[int]
    page_count: int
    output_size: int


def page_count(file_path: str) -> int:
    pdf_path = validate_pdf(file_path)
    return len(PdfReader(str(pdf_path)).pages)


def extract_pages(file_path: str, selection: str, output_path: str) -> ExtractionResult:
    """Copy the pages ``selection`` names from ``file_path`` into a new PDF.

    Open ended ranges such as ``"10-"`` are resolved against the source
    document's page count.
    """
    if not selection or not selection.strip():
        raise ValueError("selection cannot be empty")
    pdf_path = validate_pdf(file_path)
    out = Path(output_path)
    assert_output_differs(pdf_path, out)

    reader = PdfReader(str(pdf_path))
    total = len(reader.pages)
    if total == 0:
        raise ValueError(f"PDF has no pages: {pdf_path}")
    pages = resolve_selection(selection, total)

    writer = PdfWriter()
    for pno in pages:
        writer.add_page(reader.pages[pno - 1])

    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("wb") as f:
        writer.write(f)
    return ExtractionResult(
        output_path=str(out.resolve()),
        pages=pages,
        page_count=total,
        output_size=out.stat().st_size,
    )
