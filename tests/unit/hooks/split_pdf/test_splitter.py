"""Unit tests for page splitting."""

from __future__ import annotations

import gc
import io
import weakref

import pytest
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from docpart.client.hooks.split_pdf import PageSplitter, PypdfPageSource


class TestPageSplitter:
    """Test PageSplitter with a fake page source."""

    def test_split_returns_pages_in_order(self, page_source):
        splitter = PageSplitter(page_source)
        pages = splitter.split(b"pages:3")

        assert pages == [b"page-1", b"page-2", b"page-3"]
        assert page_source.extracted == [0, 1, 2]

    def test_split_opens_document_once(self, page_source):
        PageSplitter(page_source).split(b"pages:5")
        assert page_source.opened == 1

    def test_split_single_page(self, page_source):
        assert PageSplitter(page_source).split(b"pages:1") == [b"page-1"]

    def test_split_propagates_source_failure(self, page_source):
        """Malformed documents fail the whole split with the source's error."""
        with pytest.raises(ValueError, match="Malformed document"):
            PageSplitter(page_source).split(b"garbage")
        assert page_source.extracted == []

    def test_parsed_document_released_after_split(self, page_source):
        opened = []

        class TrackingSource:
            def open(self, content):
                document = page_source.open(content)
                opened.append(weakref.ref(document))
                return document

        PageSplitter(TrackingSource()).split(b"pages:2")
        gc.collect()

        assert len(opened) == 1
        assert opened[0]() is None


class TestPypdfPageSource:
    """Test the pypdf-backed page source with real documents."""

    def test_count_pages(self, make_pdf):
        assert PypdfPageSource().open(make_pdf(4)).count_pages() == 4

    def test_each_page_is_a_standalone_pdf(self, make_pdf):
        pages = PageSplitter().split(make_pdf(3))

        assert len(pages) == 3
        for page in pages:
            assert page.startswith(b"%PDF")
            assert len(PdfReader(io.BytesIO(page)).pages) == 1

    def test_malformed_document_raises_pdf_error(self):
        with pytest.raises(PdfReadError):
            PageSplitter().split(b"this is not a pdf")

    def test_source_keeps_no_document_state(self, make_pdf):
        source = PypdfPageSource()
        splitter = PageSplitter(source)

        assert len(splitter.split(make_pdf(2))) == 2
        assert len(splitter.split(make_pdf(5))) == 5
        assert vars(source) == {}
