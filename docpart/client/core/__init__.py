"""Core primitives shared across the client."""

from .exceptions import OperationStateError, PartitionError, SDKError

__all__ = [
    "PartitionError",
    "SDKError",
    "OperationStateError",
]
