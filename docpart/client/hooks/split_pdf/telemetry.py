"""Structured logging for PDF split operations.

This module provides telemetry hooks for the split hook, emitting
structured logs for observability. Page-level failures are only
observable here.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_split_skipped(*, operation_id: str, reason: str, warn: bool = False) -> None:
    """Log that a request was passed through without splitting.

    Args:
        operation_id: Operation identifier
        reason: Why splitting did not apply
        warn: Emit at WARNING instead of DEBUG
    """
    logger.log(
        logging.WARNING if warn else logging.DEBUG,
        f"Continuing without splitting: {reason}",
        extra={"operation_id": operation_id, "reason": reason},
    )


def log_parallel_limit_clamped(*, requested: int, maximum: int) -> None:
    logger.warning(
        f"'parallel_limit' was set to '{requested}'. Max number of parallel requests "
        f"can't be higher than '{maximum}'. Using the maximum value instead.",
        extra={"requested": requested, "maximum": maximum},
    )


def log_split_planned(
    *,
    operation_id: str,
    file_name: str,
    total_pages: int,
    parallel_limit: int,
) -> None:
    """Log creation of a split plan.

    Args:
        operation_id: Operation identifier
        file_name: Name of the source document
        total_pages: Number of page requests built
        parallel_limit: Concurrency bound for background requests
    """
    logger.info(
        "split_planned",
        extra={
            "operation_id": operation_id,
            "file_name": file_name,
            "total_pages": total_pages,
            "background_requests": max(total_pages - 1, 0),
            "parallel_limit": parallel_limit,
        },
    )


def log_page_request_failed(
    *,
    operation_id: str,
    page_number: int,
    error_type: str,
    error_message: str,
    status_code: int | None = None,
) -> None:
    """Log a failed background page request.

    Args:
        operation_id: Operation identifier
        page_number: One-based page number
        error_type: Exception class name, or "HTTPStatus" for non-200 answers
        error_message: Error message
        status_code: HTTP status when the server answered
    """
    logger.error(
        f"Failed to send request for page {page_number}.",
        extra={
            "operation_id": operation_id,
            "page_number": page_number,
            "error_type": error_type,
            "error_message": error_message,
            "status_code": status_code,
        },
    )


def log_split_merged(
    *,
    operation_id: str,
    merged_responses: int,
    total_elements: int,
    partial: bool,
) -> None:
    """Log that page responses were combined into one response.

    Args:
        operation_id: Operation identifier
        merged_responses: Number of page responses merged
        total_elements: Number of elements in the merged body
        partial: Whether the merge absorbed a failed final page
    """
    logger.info(
        "split_merged",
        extra={
            "operation_id": operation_id,
            "merged_responses": merged_responses,
            "total_elements": total_elements,
            "partial": partial,
        },
    )


def log_operation_released(*, operation_id: str) -> None:
    logger.warning(
        "Split operation released before its last page completed.",
        extra={"operation_id": operation_id},
    )
