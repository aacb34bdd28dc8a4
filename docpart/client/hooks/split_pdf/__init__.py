"""PDF page splitting for partition requests.

This module splits a multi-page PDF upload into single-page partition
requests, sends them with bounded concurrency and merges the results back
into one response.

Architecture:
    The split layer consists of:
    - definitions.py: Split policy, page result slots and operation state
    - splitter.py: Page extraction (PageSplitter, pypdf page source)
    - store.py: In-flight operations keyed by operation id
    - dispatcher.py: Background page requests with a concurrency bound
    - merger.py: Response merging
    - telemetry.py: Structured logging
    - hook.py: SplitPdfHook, wiring the above into the hook extension points
"""

from __future__ import annotations

from .definitions import (
    DEFAULT_PARALLEL_LIMIT,
    MAX_PARALLEL_LIMIT,
    Operation,
    PageSlots,
    SplitPolicy,
)
from .dispatcher import PageDispatcher
from .hook import SplitPdfHook
from .merger import MergeResult, ResponseMerger
from .splitter import PagedDocument, PageSource, PageSplitter, PypdfDocument, PypdfPageSource
from .store import OperationStore

__all__ = [
    "DEFAULT_PARALLEL_LIMIT",
    "MAX_PARALLEL_LIMIT",
    "Operation",
    "OperationStore",
    "MergeResult",
    "PageDispatcher",
    "PageSlots",
    "PagedDocument",
    "PageSource",
    "PageSplitter",
    "PypdfDocument",
    "PypdfPageSource",
    "ResponseMerger",
    "SplitPdfHook",
    "SplitPolicy",
]
