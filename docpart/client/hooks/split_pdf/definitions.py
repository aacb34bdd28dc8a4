"""Split metadata definitions and policy structures.

This module defines the data structures used to describe a PDF split:
the parallelism policy, the fixed-size page result slots and the
per-operation bookkeeping record.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from ...io.messages import Response
from .telemetry import log_parallel_limit_clamped

PDF_EXTENSION = ".pdf"
PDF_CONTENT_TYPE = "application/pdf"

DEFAULT_PARALLEL_LIMIT = 5
MAX_PARALLEL_LIMIT = 15


@dataclass(frozen=True)
class SplitPolicy:
    """Parallelism policy for background page requests.

    Attributes:
        parallel_limit: Requested number of concurrent page requests
            (None or <= 0 means the default of 5; capped at 15)
    """

    parallel_limit: int | None = None

    def effective_parallel_limit(self) -> int:
        """Resolve the bound actually applied to page requests.

        Returns:
            ``min(parallel_limit, 15)``, or 5 when unset or not positive
        """
        if self.parallel_limit is None or self.parallel_limit <= 0:
            return DEFAULT_PARALLEL_LIMIT
        if self.parallel_limit > MAX_PARALLEL_LIMIT:
            log_parallel_limit_clamped(
                requested=self.parallel_limit, maximum=MAX_PARALLEL_LIMIT
            )
            return MAX_PARALLEL_LIMIT
        return self.parallel_limit


class PageSlots:
    """Fixed-length, index-addressed page response slots.

    Slot ``i`` belongs to background page request ``i`` and is filled at most
    once. Reading in slot order yields page order regardless of the order in
    which requests completed.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("PageSlots size cannot be negative")
        self._slots: list[Response | None] = [None] * size

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> Response | None:
        return self._slots[index]

    def fill(self, index: int, response: Response) -> None:
        """Store the response for page request ``index``.

        Raises:
            IndexError: If index is outside the fixed size
            ValueError: If the slot was already filled
        """
        if self._slots[index] is not None:
            raise ValueError(f"Slot {index} is already filled")
        self._slots[index] = response

    def collected(self) -> list[Response]:
        """Return the filled slots in slot order, skipping empty ones."""
        return [r for r in self._slots if r is not None]


@dataclass
class Operation:
    """In-flight state of one split partition call.

    Attributes:
        operation_id: Identifier of the top-level call
        pending_responses: One slot per background page request
        join_handle: Completes once every background page request finished
    """

    operation_id: str
    pending_responses: PageSlots
    join_handle: asyncio.Future[None] | None = field(default=None)

    async def wait(self) -> list[Response]:
        """Join the background requests and return the successful responses."""
        if self.join_handle is not None:
            await self.join_handle
        return self.pending_responses.collected()
