"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..io.messages import Response


class PartitionError(Exception):
    """Base exception for all library errors."""

    pass


class SDKError(PartitionError):
    """Partition endpoint answered with a non-success status.

    Carries the raw response so after-error hooks can inspect or replace it.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: Response | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class OperationStateError(PartitionError):
    """Operation bookkeeping is inconsistent (e.g. an id registered twice)."""

    def __init__(self, message: str, operation_id: str | None = None) -> None:
        super().__init__(message)
        self.operation_id = operation_id
