"""High-level partition client driving the hook pipeline.

Every call goes through the same steps:

- a fresh operation id is generated so concurrent calls never share state
- before_request hooks may replace the outgoing request
- the (possibly replaced) request is sent through the transport
- after_success runs for 2xx answers, after_error for transport errors and
  non-2xx answers; an error still present after after_error is raised
- a call abandoned any other way (e.g. cancelled) runs the release hooks
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from typing import Any

from multidict import CIMultiDict

from ..config import (
    API_KEY_HEADER,
    DEFAULT_SERVER_URL,
    DEFAULT_TIMEOUT_SECONDS,
    PARTITION_FORM_FILES_KEY,
    PARTITION_FORM_SPLIT_PDF_PAGE_KEY,
    PARTITION_PATH,
)
from ..core.exceptions import SDKError
from ..hooks import (
    AfterErrorContext,
    AfterSuccessContext,
    BeforeRequestContext,
    SDKHooks,
    SDKInitOptions,
    SplitPdfHook,
    Transport,
)
from ..io.messages import MultipartForm, Request, Response
from ..models import PartitionResponse
from ..utils.http import HTTPClient

logger = logging.getLogger(__name__)


class PartitionClient:
    """Client for the document partition endpoint."""

    def __init__(
        self,
        *,
        server_url: str = DEFAULT_SERVER_URL,
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        split_pdf_parallel_limit: int | None = None,
        client: Transport | None = None,
        hooks: SDKHooks | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            server_url: Base URL of the partition service
            api_key: Optional API key sent with every request
            timeout: Total timeout per HTTP request (seconds)
            split_pdf_parallel_limit: Concurrent page requests when splitting
                PDFs (default 5, capped at 15)
            client: Transport to use instead of a new ``HTTPClient``
            hooks: Hook registry to use instead of the default one
        """
        self._api_key = api_key
        self._owns_client = client is None
        transport: Transport = client or HTTPClient(timeout=timeout)

        if hooks is None:
            hooks = SDKHooks()
            hooks.register(SplitPdfHook(parallel_limit=split_pdf_parallel_limit))
        self._hooks = hooks

        opts = self._hooks.sdk_init(SDKInitOptions(base_url=server_url.rstrip("/"), client=transport))
        self._server_url = opts.base_url
        self._client = opts.client or transport

    @property
    def server_url(self) -> str:
        return self._server_url

    def build_request(
        self,
        file_name: str,
        content: bytes,
        *,
        split_pdf_page: bool = True,
        **parameters: Any,
    ) -> Request:
        """Build the multipart partition request.

        Args:
            file_name: Name of the uploaded document
            content: Document bytes
            split_pdf_page: Split PDFs client-side into per-page requests
            **parameters: Extra partition form parameters; list values are
                sent as repeated fields, None values are skipped
        """
        form = MultipartForm()
        form.append(PARTITION_FORM_FILES_KEY, content, filename=file_name)
        form.append(PARTITION_FORM_SPLIT_PDF_PAGE_KEY, "true" if split_pdf_page else "false")
        for name, value in parameters.items():
            if value is None:
                continue
            values = value if isinstance(value, (list, tuple)) else [value]
            for v in values:
                form.append(name, _form_value(v))

        headers: CIMultiDict[str] = CIMultiDict({"accept": "application/json"})
        if self._api_key:
            headers[API_KEY_HEADER] = self._api_key

        return Request(
            method="POST",
            url=f"{self._server_url}{PARTITION_PATH}",
            headers=headers,
            form=form,
        )

    async def send(self, request: Request) -> Response:
        """Send a request through the hook pipeline.

        Any exception raised by the transport is handed to after_error. When
        the call is abandoned some other way (for example cancelled), release
        hooks drop the per-call state before the exception propagates.

        Raises:
            SDKError: If the endpoint answered with a non-2xx status and no
                hook recovered the call
            Exception: Whatever the transport raised, if no hook recovered
        """
        operation_id = f"partition-{uuid.uuid4().hex}"
        request = await self._hooks.before_request(
            BeforeRequestContext(operation_id=operation_id, base_url=self._server_url), request
        )

        try:
            return await self._send_prepared(operation_id, request)
        except BaseException:
            self._hooks.release(operation_id)
            raise

    async def _send_prepared(self, operation_id: str, request: Request) -> Response:
        error_ctx = AfterErrorContext(operation_id=operation_id, base_url=self._server_url)
        try:
            response = await self._client.send(request)
        except Exception as e:
            logger.error(f"Partition request failed: {e!r}")
            recovered, error = await self._hooks.after_error(error_ctx, None, e)
            return self._resolve(recovered, error)

        if not response.ok:
            sdk_error = SDKError(
                f"API error occurred: status {response.status} {response.reason}".strip(),
                status_code=response.status,
                response=response,
            )
            recovered, error = await self._hooks.after_error(error_ctx, response, sdk_error)
            return self._resolve(recovered, error)

        return await self._hooks.after_success(
            AfterSuccessContext(operation_id=operation_id, base_url=self._server_url), response
        )

    async def partition(
        self,
        file_name: str,
        content: bytes,
        *,
        split_pdf_page: bool = True,
        **parameters: Any,
    ) -> PartitionResponse:
        """Partition a document and parse the returned elements."""
        request = self.build_request(
            file_name, content, split_pdf_page=split_pdf_page, **parameters
        )
        response = await self.send(request)
        return PartitionResponse.from_response(response)

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_client and isinstance(self._client, HTTPClient):
            await self._client.close()

    async def __aenter__(self) -> PartitionClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()

    @staticmethod
    def _resolve(response: Response | None, error: Any) -> Response:
        if error is not None:
            if isinstance(error, BaseException):
                raise error
            raise SDKError(str(error))
        if response is None:
            raise SDKError("after_error hooks cleared the error without providing a response")
        return response


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        return ",".join(str(v) for v in value)
    return str(value)
