"""Hook that splits PDF uploads into per-page partition requests.

Architecture:
    before_request splits the uploaded PDF into N single-page requests,
    registers an Operation, starts pages 1..N-1 in the background and hands
    page N back to the pipeline, which sends it as usual. after_success and
    after_error join the background requests and merge every successful
    page into one response.

Failure Policy:
    - Split not requested, not a PDF, or no transport: request passed through
    - Background page fails: logged, page dropped from the merge
    - At least one background page succeeded: merged success, error cleared
    - Nothing succeeded: original response and error returned unchanged
    - Document cannot be parsed: page source error raised from before_request,
      nothing dispatched and no Operation created
    - Call abandoned before the last page completed: operation released,
      background pages finish unobserved

See Also:
    - PageSplitter: Produces the page documents
    - PageDispatcher: Runs background page requests
    - OperationStore: Holds in-flight operations between hook calls
    - ResponseMerger: Builds the merged response
"""

from __future__ import annotations

from typing import Any

from ...config import PARTITION_FORM_FILES_KEY, PARTITION_FORM_SPLIT_PDF_PAGE_KEY
from ...io.messages import Request, Response
from ...utils.strings import string_to_boolean
from ..types import (
    AfterErrorContext,
    AfterSuccessContext,
    BeforeRequestContext,
    SDKInitOptions,
    Transport,
)
from .definitions import PDF_CONTENT_TYPE, PDF_EXTENSION, SplitPolicy
from .dispatcher import PageDispatcher
from .merger import ResponseMerger
from .splitter import PageSource, PageSplitter
from .store import OperationStore
from .telemetry import (
    log_operation_released,
    log_split_merged,
    log_split_planned,
    log_split_skipped,
)


class SplitPdfHook:
    """Splits PDF partition requests into page requests sent in parallel.

    Implements the sdk_init, before_request, after_success and after_error
    extension points, plus release for abandoned calls.
    """

    def __init__(
        self,
        *,
        parallel_limit: int | None = None,
        page_source: PageSource | None = None,
        store: OperationStore | None = None,
        merger: ResponseMerger | None = None,
    ) -> None:
        """Initialize the hook.

        Args:
            parallel_limit: Maximum concurrent background page requests
                (default 5, capped at 15)
            page_source: Paging capability (defaults to pypdf)
            store: Operation store (injectable for testing)
            merger: Response merger (injectable for testing)
        """
        self._client: Transport | None = None
        self._policy = SplitPolicy(parallel_limit=parallel_limit)
        self._splitter = PageSplitter(page_source)
        self._store = store or OperationStore()
        self._merger = merger or ResponseMerger()

    @property
    def store(self) -> OperationStore:
        return self._store

    def sdk_init(self, opts: SDKInitOptions) -> SDKInitOptions:
        """Capture the transport used for background page requests."""
        self._client = opts.client
        return SDKInitOptions(base_url=opts.base_url, client=opts.client)

    async def before_request(self, hook_ctx: BeforeRequestContext, request: Request) -> Request:
        """Split a PDF upload, returning the request for its last page.

        The original request is returned when splitting is not requested,
        the file is not a PDF, or no transport is available.
        """
        operation_id = hook_ctx.operation_id
        form = request.form
        split_pdf_page = string_to_boolean(form.get_value(PARTITION_FORM_SPLIT_PDF_PAGE_KEY))
        file = form.get(PARTITION_FORM_FILES_KEY)

        if not split_pdf_page:
            return request

        if file is None or not file.filename or not file.filename.endswith(PDF_EXTENSION):
            log_split_skipped(
                operation_id=operation_id, reason="Given file is not a PDF.", warn=True
            )
            return request

        if self._client is None:
            log_split_skipped(
                operation_id=operation_id, reason="HTTP client not accessible!", warn=True
            )
            return request

        content = file.value if isinstance(file.value, bytes) else file.value.encode("utf-8")
        pages = self._splitter.split(content)
        if not pages:
            log_split_skipped(
                operation_id=operation_id, reason="PDF has no pages.", warn=True
            )
            return request

        requests = self._build_page_requests(request, file.filename, pages)
        parallel_limit = self._policy.effective_parallel_limit()
        log_split_planned(
            operation_id=operation_id,
            file_name=file.filename,
            total_pages=len(requests),
            parallel_limit=parallel_limit,
        )

        background = requests[:-1]
        operation = self._store.create(operation_id, len(background))
        dispatcher = PageDispatcher(self._client, parallel_limit=parallel_limit)
        operation.join_handle = dispatcher.dispatch(
            operation_id=operation_id,
            requests=background,
            slots=operation.pending_responses,
        )

        return requests[-1]

    async def after_success(self, hook_ctx: AfterSuccessContext, response: Response) -> Response:
        """Merge background page responses with the last page response.

        Returns the response unchanged when the request was not split.
        """
        operation_id = hook_ctx.operation_id
        operation = self._store.get(operation_id)
        if operation is None:
            return response

        try:
            responses = await operation.wait()
            merged = self._merger.merge([*responses, response], primary=response)
        finally:
            self._store.clear(operation_id)

        log_split_merged(
            operation_id=operation_id,
            merged_responses=len(responses) + 1,
            total_elements=merged.total_elements,
            partial=False,
        )
        return merged.response

    async def after_error(
        self,
        hook_ctx: AfterErrorContext,
        response: Response | None,
        error: Any,
    ) -> tuple[Response | None, Any]:
        """Absorb a failed last page when any background page succeeded.

        Returns the merged background responses with no error, or the
        original response and error when nothing succeeded or the request
        was not split.
        """
        operation_id = hook_ctx.operation_id
        operation = self._store.get(operation_id)
        if operation is None:
            return response, error

        try:
            responses = await operation.wait()
            if not responses:
                return response, error
            merged = self._merger.merge(responses, primary=responses[0])
        finally:
            self._store.clear(operation_id)

        log_split_merged(
            operation_id=operation_id,
            merged_responses=len(responses),
            total_elements=merged.total_elements,
            partial=True,
        )
        return merged.response, None

    def release(self, operation_id: str) -> None:
        """Drop the state of an operation whose last page never completed.

        Called by the pipeline when the visible request was abandoned (for
        example cancelled). Background page requests are not cancelled; they
        run to completion against the detached slots. Unknown ids are a no-op.
        """
        if self._store.clear(operation_id) is not None:
            log_operation_released(operation_id=operation_id)

    def _build_page_requests(
        self, request: Request, file_name: str, pages: list[bytes]
    ) -> list[Request]:
        """Derive one request per page.

        The content-type header is dropped so the transport writes a fresh
        multipart boundary; the split flag is forced off so the server does
        not split again.
        """
        headers = request.headers.copy()
        headers.popall("content-type", None)

        stem = file_name.removesuffix(PDF_EXTENSION)
        base_form = request.form.copy()
        base_form.delete(PARTITION_FORM_SPLIT_PDF_PAGE_KEY)
        base_form.delete(PARTITION_FORM_FILES_KEY)
        base_form.append(PARTITION_FORM_SPLIT_PDF_PAGE_KEY, "false")

        requests: list[Request] = []
        for i, page in enumerate(pages):
            form = base_form.copy()
            form.append(
                PARTITION_FORM_FILES_KEY,
                page,
                filename=f"{stem}-{i + 1}.pdf",
                content_type=PDF_CONTENT_TYPE,
            )
            requests.append(
                request.replace(headers=headers.copy(), form=form, cookies=dict(request.cookies))
            )
        return requests
