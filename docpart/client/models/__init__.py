"""Data models for partition results.

All models are Pydantic v2 and immutable (frozen=True).
"""

from .partition import PartitionResponse

__all__ = ["PartitionResponse"]
