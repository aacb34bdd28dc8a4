"""Bounded-concurrency execution of background page requests.

This module provides the PageDispatcher class that sends page requests in
the background, stores successful responses by request index and swallows
individual failures so one bad page never aborts its siblings.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from ...io.messages import Request
from ..types import Transport
from .definitions import PageSlots
from .telemetry import log_page_request_failed


class PageDispatcher:
    """Runs page requests against a transport with a concurrency bound."""

    def __init__(self, client: Transport, *, parallel_limit: int) -> None:
        """Initialize dispatcher.

        Args:
            client: Transport used for every page request
            parallel_limit: Maximum number of requests in flight at once
        """
        if parallel_limit < 1:
            raise ValueError("parallel_limit must be a positive integer")
        self._client = client
        self._parallel_limit = parallel_limit

    @property
    def parallel_limit(self) -> int:
        return self._parallel_limit

    def dispatch(
        self,
        *,
        operation_id: str,
        requests: Sequence[Request],
        slots: PageSlots,
    ) -> asyncio.Task[None]:
        """Start sending ``requests`` in the background.

        Request ``i`` writes slot ``i`` on a 200 answer; any other outcome
        leaves the slot empty and is logged.

        Args:
            operation_id: Operation the requests belong to (for logging)
            requests: Page requests, in page order
            slots: Result slots, one per request

        Returns:
            Join handle completing once every request succeeded or failed.
            It never raises because of a page failure.
        """
        if len(requests) != len(slots):
            raise ValueError(
                f"Got {len(requests)} requests for {len(slots)} result slots"
            )

        semaphore = asyncio.Semaphore(self._parallel_limit)

        async def send_page(index: int, request: Request) -> None:
            async with semaphore:
                try:
                    response = await self._client.send(request)
                except Exception as e:
                    log_page_request_failed(
                        operation_id=operation_id,
                        page_number=index + 1,
                        error_type=type(e).__name__,
                        error_message=str(e),
                    )
                    return

            if response.status == 200:
                slots.fill(index, response)
            else:
                log_page_request_failed(
                    operation_id=operation_id,
                    page_number=index + 1,
                    error_type="HTTPStatus",
                    error_message=response.reason,
                    status_code=response.status,
                )

        async def join() -> None:
            await asyncio.gather(*(send_page(i, r) for i, r in enumerate(requests)))

        return asyncio.create_task(join(), name=f"split-pdf:{operation_id}")
