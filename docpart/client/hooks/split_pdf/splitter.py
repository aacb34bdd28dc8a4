"""Split a PDF document into standalone single-page documents."""

from __future__ import annotations

import io
from typing import Protocol

from pypdf import PdfReader, PdfWriter


class PagedDocument(Protocol):
    """A parsed document able to count and extract its pages."""

    def count_pages(self) -> int: ...

    def extract_page(self, index: int) -> bytes: ...


class PageSource(Protocol):
    """Paging capability over an opaque document format."""

    def open(self, content: bytes) -> PagedDocument: ...


class PypdfDocument:
    """PDF parsed once with pypdf."""

    def __init__(self, content: bytes) -> None:
        self._reader = PdfReader(io.BytesIO(content))

    def count_pages(self) -> int:
        return len(self._reader.pages)

    def extract_page(self, index: int) -> bytes:
        writer = PdfWriter()
        writer.add_page(self._reader.pages[index])
        buffer = io.BytesIO()
        writer.write(buffer)
        return buffer.getvalue()


class PypdfPageSource:
    """Page source backed by pypdf.

    Parsing failures (``pypdf.errors.PdfReadError`` and friends) propagate
    unchanged. The source holds no state; each ``open`` parses anew.
    """

    def open(self, content: bytes) -> PypdfDocument:
        return PypdfDocument(content)


class PageSplitter:
    """Produces one single-page document per source page, in page order."""

    def __init__(self, source: PageSource | None = None) -> None:
        self._source = source or PypdfPageSource()

    def split(self, content: bytes) -> list[bytes]:
        """Split a document into single-page documents.

        The document is parsed once per call and released when the call
        returns.

        Args:
            content: Source document bytes

        Returns:
            One document per page, ordered by source page index

        Raises:
            Whatever the page source raises for a malformed document. This is
            fatal to the whole split.
        """
        document = self._source.open(content)
        return [document.extract_page(i) for i in range(document.count_pages())]
