"""String parsing helpers."""

from __future__ import annotations

_TRUTHY = frozenset({"true", "1", "yes"})


def string_to_boolean(value: str | bytes | None) -> bool:
    """Parse a boolean-like form value.

    Accepts "true", "1" and "yes" in any case (surrounding whitespace ignored).
    Everything else, including None, is False.
    """
    if value is None:
        return False
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    return value.strip().lower() in _TRUTHY
