"""Combine page-level responses into one logical response."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from multidict import CIMultiDict

from ...io.messages import Response


@dataclass(frozen=True)
class MergeResult:
    """Merged response.

    Attributes:
        response: The merged response
        total_elements: Number of elements in the merged body
    """

    response: Response
    total_elements: int


class ResponseMerger:
    """Merges JSON-array page responses.

    The merged response reuses the status and headers of a primary response
    (minus ``content-length``, which no longer matches) and carries the
    one-level flattening of every input body, in input order.
    """

    def merge(self, responses: Sequence[Response], primary: Response) -> MergeResult:
        """Build the merged response.

        Args:
            responses: Page responses, in the order their elements should appear
            primary: Response whose status and headers are reused

        Returns:
            MergeResult holding a new response; inputs are left untouched
        """
        headers = CIMultiDict(primary.headers)
        headers.popall("content-length", None)

        elements = self.flatten([r.json() for r in responses])
        body = json.dumps(elements, separators=(",", ":")).encode("utf-8")

        response = Response(
            status=primary.status,
            reason=primary.reason,
            headers=headers,
            body=body,
        )
        return MergeResult(response=response, total_elements=len(elements))

    @staticmethod
    def flatten(bodies: Sequence[Any]) -> list[Any]:
        """Flatten exactly one level: list bodies are spliced, others appended."""
        elements: list[Any] = []
        for body in bodies:
            if isinstance(body, list):
                elements.extend(body)
            else:
                elements.append(body)
        return elements
