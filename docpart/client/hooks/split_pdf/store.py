"""Concurrency-safe registry of in-flight split operations.

Architecture:
    One ``Operation`` per split partition call, keyed by the operation id
    handed to the hooks by the pipeline. Several calls may be in flight at
    once (on one event loop or across threads), so every access to the map
    goes through a single lock. The lock only guards the map itself; an
    operation's slots are written by its own page requests and read after
    its join handle completes.

Lifecycle:
    - create(): exactly once, when a request is split
    - get(): any number of times while the operation is in flight
    - clear(): exactly once after after_success/after_error consumed the
      operation; clearing an unknown id is a no-op
"""

from __future__ import annotations

import threading

from ...core.exceptions import OperationStateError
from .definitions import Operation, PageSlots


class OperationStore:
    """Mapping from operation id to in-flight ``Operation``."""

    def __init__(self) -> None:
        self._operations: dict[str, Operation] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._operations)

    def __contains__(self, operation_id: object) -> bool:
        with self._lock:
            return operation_id in self._operations

    def create(self, operation_id: str, size: int) -> Operation:
        """Register a new operation with ``size`` empty page slots.

        Raises:
            OperationStateError: If the id is already in flight
        """
        with self._lock:
            if operation_id in self._operations:
                raise OperationStateError(
                    f"Operation '{operation_id}' is already in flight",
                    operation_id=operation_id,
                )
            operation = Operation(operation_id=operation_id, pending_responses=PageSlots(size))
            self._operations[operation_id] = operation
            return operation

    def get(self, operation_id: str) -> Operation | None:
        with self._lock:
            return self._operations.get(operation_id)

    def clear(self, operation_id: str) -> Operation | None:
        """Remove the operation, returning it if it existed."""
        with self._lock:
            return self._operations.pop(operation_id, None)
