"""Partition response model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..io.messages import Response


class PartitionResponse(BaseModel):
    """Parsed result of a partition call."""

    content_type: str
    status_code: int = Field(..., ge=100, le=599)
    elements: list[dict[str, Any]] | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_response(cls, response: Response) -> PartitionResponse:
        """Build from a raw response.

        Elements are only parsed from 200 answers with a JSON content type.
        """
        content_type = response.content_type
        elements = None
        if response.status == 200 and "json" in content_type.lower():
            elements = response.json()
        return cls(content_type=content_type, status_code=response.status, elements=elements)
