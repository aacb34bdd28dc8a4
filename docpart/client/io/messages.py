"""Raw request/response objects exchanged with the partition endpoint.

Architecture:
    Hooks operate on these objects rather than on typed request models.
    The multipart body is kept as an ordered list of form fields and only
    encoded by the transport at send time, so derived requests never carry
    a stale multipart boundary.

Design Decisions:
    - Requests are frozen: derived requests are built with ``replace()``
    - Headers use ``CIMultiDict``: HTTP header names are case-insensitive
    - Response bodies are fully buffered bytes so they can be re-read by
      several hooks (the equivalent of cloning a streamed body)
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

import aiohttp
from multidict import CIMultiDict


@dataclass(frozen=True)
class FormField:
    """Single multipart form part.

    Attributes:
        name: Form field name
        value: Text value, or raw bytes for file parts
        filename: File name for file parts (None for plain fields)
        content_type: Optional content type of a file part
    """

    name: str
    value: str | bytes
    filename: str | None = None
    content_type: str | None = None

    @property
    def is_file(self) -> bool:
        return self.filename is not None


class MultipartForm:
    """Ordered, multi-valued multipart form body."""

    def __init__(self, fields: list[FormField] | None = None) -> None:
        self._fields: list[FormField] = list(fields or [])

    def __iter__(self) -> Iterator[FormField]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: object) -> bool:
        return any(f.name == name for f in self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultipartForm):
            return NotImplemented
        return self._fields == other._fields

    def __repr__(self) -> str:
        names = ", ".join(f.name for f in self._fields)
        return f"MultipartForm([{names}])"

    def get(self, name: str) -> FormField | None:
        """Return the first field with the given name."""
        for f in self._fields:
            if f.name == name:
                return f
        return None

    def get_value(self, name: str, default: str | None = None) -> str | None:
        """Return the first text value for ``name``.

        Byte values are decoded as UTF-8, file parts are ignored.
        """
        f = self.get(name)
        if f is None or f.is_file:
            return default
        if isinstance(f.value, bytes):
            return f.value.decode("utf-8", errors="replace")
        return f.value

    def append(
        self,
        name: str,
        value: str | bytes,
        *,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> None:
        self._fields.append(
            FormField(name=name, value=value, filename=filename, content_type=content_type)
        )

    def delete(self, name: str) -> None:
        """Remove every field with the given name."""
        self._fields = [f for f in self._fields if f.name != name]

    def copy(self) -> MultipartForm:
        return MultipartForm(self._fields)

    def to_form_data(self) -> aiohttp.FormData:
        """Encode into an aiohttp form; the boundary is chosen at send time."""
        form = aiohttp.FormData()
        for f in self._fields:
            if f.is_file:
                form.add_field(
                    f.name,
                    f.value,
                    filename=f.filename,
                    content_type=f.content_type or "application/octet-stream",
                )
            else:
                form.add_field(f.name, f.value)
        return form


@dataclass(frozen=True)
class Request:
    """Outgoing HTTP request with a multipart form body."""

    method: str
    url: str
    headers: CIMultiDict[str] = field(default_factory=CIMultiDict)
    form: MultipartForm = field(default_factory=MultipartForm)
    cookies: dict[str, str] = field(default_factory=dict)

    def replace(self, **changes: Any) -> Request:
        """Derive a new request with the given attributes changed."""
        return dataclasses.replace(self, **changes)


@dataclass
class Response:
    """Fully buffered HTTP response."""

    status: int
    reason: str = ""
    headers: CIMultiDict[str] = field(default_factory=CIMultiDict)
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "")

    def json(self) -> Any:
        return json.loads(self.body)
