"""Hook contexts and extension-point protocols.

Architecture:
    The client pipeline exposes five extension points. A hook implements any
    subset of them; ``SDKHooks`` files it under each protocol it satisfies.

    - sdk_init: once, when the client is built (receives the transport)
    - before_request: may replace the outgoing request
    - after_success: may replace a 2xx response
    - after_error: may replace the response and/or clear the error
    - release: the call was abandoned (e.g. cancelled) before a response
      reached after_success or after_error; drop any per-call state

See Also:
    - SDKHooks: Registration and ordered invocation
    - SplitPdfHook: Splits PDF uploads into page requests
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from ..io.messages import Request, Response


class Transport(Protocol):
    """Anything able to send a raw request (e.g. ``HTTPClient``)."""

    async def send(self, request: Request) -> Response: ...


@dataclass(frozen=True)
class SDKInitOptions:
    base_url: str
    client: Transport | None


@dataclass(frozen=True)
class HookContext:
    """Context shared by the per-request extension points.

    Attributes:
        operation_id: Identifier unique to one top-level call
        base_url: Server URL the call targets
    """

    operation_id: str
    base_url: str = ""


@dataclass(frozen=True)
class BeforeRequestContext(HookContext):
    pass


@dataclass(frozen=True)
class AfterSuccessContext(HookContext):
    pass


@dataclass(frozen=True)
class AfterErrorContext(HookContext):
    pass


@runtime_checkable
class SDKInitHook(Protocol):
    def sdk_init(self, opts: SDKInitOptions) -> SDKInitOptions: ...


@runtime_checkable
class BeforeRequestHook(Protocol):
    async def before_request(self, hook_ctx: BeforeRequestContext, request: Request) -> Request: ...


@runtime_checkable
class AfterSuccessHook(Protocol):
    async def after_success(
        self, hook_ctx: AfterSuccessContext, response: Response
    ) -> Response: ...


@runtime_checkable
class AfterErrorHook(Protocol):
    async def after_error(
        self,
        hook_ctx: AfterErrorContext,
        response: Response | None,
        error: Any,
    ) -> tuple[Response | None, Any]: ...


@runtime_checkable
class ReleaseHook(Protocol):
    def release(self, operation_id: str) -> None: ...
