"""Unit tests for raw request/response objects."""

from __future__ import annotations

import aiohttp
import pytest
from multidict import CIMultiDict

from docpart.client.io import MultipartForm, Request, Response


class TestMultipartForm:
    """Test form field access and mutation."""

    def make_form(self) -> MultipartForm:
        form = MultipartForm()
        form.append("files", b"%PDF-1.7", filename="doc.pdf", content_type="application/pdf")
        form.append("split_pdf_page", "true")
        form.append("languages", "eng")
        form.append("languages", "deu")
        return form

    def test_get_returns_first_field(self):
        form = self.make_form()
        assert form.get("languages").value == "eng"
        assert [f.value for f in form if f.name == "languages"] == ["eng", "deu"]
        assert form.get("missing") is None

    def test_get_value_ignores_file_parts(self):
        form = self.make_form()
        assert form.get_value("split_pdf_page") == "true"
        assert form.get_value("files") is None
        assert form.get_value("missing", "default") == "default"

    def test_get_value_decodes_bytes(self):
        form = MultipartForm()
        form.append("split_pdf_page", b"yes")
        assert form.get_value("split_pdf_page") == "yes"

    def test_delete_removes_all_values(self):
        form = self.make_form()
        form.delete("languages")
        assert "languages" not in form
        assert len(form) == 2

    def test_copy_is_independent(self):
        form = self.make_form()
        clone = form.copy()
        clone.delete("files")

        assert "files" in form
        assert clone != form

    def test_to_form_data_is_multipart(self):
        data = self.make_form().to_form_data()
        assert isinstance(data, aiohttp.FormData)
        assert data.is_multipart


class TestRequestResponse:
    """Test request derivation and response parsing."""

    def test_replace_derives_new_request(self):
        request = Request(method="POST", url="https://a", headers=CIMultiDict({"X": "1"}))
        derived = request.replace(url="https://b")

        assert derived.url == "https://b"
        assert request.url == "https://a"
        assert derived.headers["x"] == "1"

    def test_request_is_frozen(self):
        request = Request(method="POST", url="https://a")
        with pytest.raises(AttributeError):
            request.url = "https://b"

    def test_response_json_and_ok(self):
        response = Response(
            status=200,
            headers=CIMultiDict({"Content-Type": "application/json"}),
            body=b'[{"type": "Title"}]',
        )
        assert response.ok
        assert response.content_type == "application/json"
        assert response.json() == [{"type": "Title"}]

    @pytest.mark.parametrize("status", [199, 301, 404, 500])
    def test_response_not_ok(self, status):
        assert not Response(status=status).ok
