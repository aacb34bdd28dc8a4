"""Shared fakes for unit tests."""

from __future__ import annotations

import asyncio
import io
import json
from collections.abc import Callable
from typing import Any

import pytest
from multidict import CIMultiDict
from pypdf import PdfWriter

from docpart.client.io import Request, Response


def json_response(elements: Any, status: int = 200, reason: str = "OK") -> Response:
    body = json.dumps(elements).encode("utf-8")
    return Response(
        status=status,
        reason=reason,
        headers=CIMultiDict(
            {"content-type": "application/json", "content-length": str(len(body))}
        ),
        body=body,
    )


class FakeTransport:
    """Transport answering through a handler and tracking concurrency."""

    def __init__(
        self,
        handler: Callable[[Request], Response],
        delay: float | Callable[[Request], float] = 0.0,
    ) -> None:
        self.handler = handler
        self.delay = delay
        self.requests: list[Request] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def send(self, request: Request) -> Response:
        self.requests.append(request)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            delay = self.delay(request) if callable(self.delay) else self.delay
            await asyncio.sleep(delay)
            return self.handler(request)
        finally:
            self.in_flight -= 1


class FakeDocument:
    def __init__(self, pages: int, extracted: list[int]) -> None:
        self.pages = pages
        self.extracted = extracted

    def count_pages(self) -> int:
        return self.pages

    def extract_page(self, index: int) -> bytes:
        self.extracted.append(index)
        return f"page-{index + 1}".encode()


class FakePageSource:
    """Page source over documents of the form b"pages:<n>"."""

    def __init__(self) -> None:
        self.extracted: list[int] = []
        self.opened = 0

    def open(self, content: bytes) -> FakeDocument:
        prefix, _, count = content.partition(b":")
        if prefix != b"pages":
            raise ValueError("Malformed document")
        self.opened += 1
        return FakeDocument(int(count), self.extracted)


def page_number(request: Request) -> int:
    """One-based page number from a derived request's file name."""
    file = request.form.get("files")
    assert file is not None and file.filename is not None
    return int(file.filename.rsplit("-", 1)[1].removesuffix(".pdf"))


@pytest.fixture
def make_transport() -> Callable[..., FakeTransport]:
    return FakeTransport


@pytest.fixture
def page_source() -> FakePageSource:
    return FakePageSource()


@pytest.fixture
def make_json_response() -> Callable[..., Response]:
    return json_response


@pytest.fixture
def get_page_number() -> Callable[[Request], int]:
    return page_number


@pytest.fixture
def make_pdf() -> Callable[[int], bytes]:
    """Build a real PDF with the given number of blank pages."""

    def _make(pages: int) -> bytes:
        writer = PdfWriter()
        for _ in range(pages):
            writer.add_blank_page(width=612, height=792)
        buffer = io.BytesIO()
        writer.write(buffer)
        return buffer.getvalue()

    return _make
