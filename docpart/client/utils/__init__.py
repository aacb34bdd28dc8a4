"""Utility functions."""

from .http import HTTPClient
from .strings import string_to_boolean

__all__ = ["HTTPClient", "string_to_boolean"]
