"""Unit tests for PartitionResponse."""

import pytest
from multidict import CIMultiDict
from pydantic import ValidationError

from docpart.client.io import Response
from docpart.client.models import PartitionResponse


def test_from_json_response():
    response = Response(
        status=200,
        headers=CIMultiDict({"Content-Type": "application/json"}),
        body=b'[{"type": "Title", "text": "Hello"}]',
    )
    result = PartitionResponse.from_response(response)

    assert result.status_code == 200
    assert result.content_type == "application/json"
    assert result.elements == [{"type": "Title", "text": "Hello"}]


def test_non_json_response_has_no_elements():
    response = Response(
        status=200, headers=CIMultiDict({"Content-Type": "text/csv"}), body=b"type,text"
    )
    assert PartitionResponse.from_response(response).elements is None


def test_model_is_frozen():
    result = PartitionResponse(content_type="application/json", status_code=200, elements=[])
    with pytest.raises(ValidationError):
        result.status_code = 500


def test_invalid_status_code_rejected():
    with pytest.raises(ValidationError):
        PartitionResponse(content_type="application/json", status_code=42)
