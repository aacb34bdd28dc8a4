"""Hook registry invoked by the client pipeline."""

from __future__ import annotations

import logging
from typing import Any

from ..io.messages import Request, Response
from .types import (
    AfterErrorContext,
    AfterErrorHook,
    AfterSuccessContext,
    AfterSuccessHook,
    BeforeRequestContext,
    BeforeRequestHook,
    ReleaseHook,
    SDKInitHook,
    SDKInitOptions,
)

logger = logging.getLogger(__name__)


class SDKHooks:
    """Ordered collection of hooks, one list per extension point.

    Each extension point threads its value through the registered hooks in
    registration order: the output of one hook is the input of the next.
    """

    def __init__(self) -> None:
        self._sdk_init_hooks: list[SDKInitHook] = []
        self._before_request_hooks: list[BeforeRequestHook] = []
        self._after_success_hooks: list[AfterSuccessHook] = []
        self._after_error_hooks: list[AfterErrorHook] = []
        self._release_hooks: list[ReleaseHook] = []

    def register(self, hook: Any) -> None:
        """Register a hook under every extension point it implements.

        Raises:
            TypeError: If the object implements none of the extension points
        """
        registered = False
        if isinstance(hook, SDKInitHook):
            self._sdk_init_hooks.append(hook)
            registered = True
        if isinstance(hook, BeforeRequestHook):
            self._before_request_hooks.append(hook)
            registered = True
        if isinstance(hook, AfterSuccessHook):
            self._after_success_hooks.append(hook)
            registered = True
        if isinstance(hook, AfterErrorHook):
            self._after_error_hooks.append(hook)
            registered = True
        if isinstance(hook, ReleaseHook):
            self._release_hooks.append(hook)
            registered = True

        if not registered:
            raise TypeError(f"{hook.__class__.__name__} implements no hook extension point")
        logger.debug(f"Registered hook: {hook.__class__.__name__}")

    def sdk_init(self, opts: SDKInitOptions) -> SDKInitOptions:
        for hook in self._sdk_init_hooks:
            opts = hook.sdk_init(opts)
        return opts

    async def before_request(self, hook_ctx: BeforeRequestContext, request: Request) -> Request:
        for hook in self._before_request_hooks:
            request = await hook.before_request(hook_ctx, request)
        return request

    async def after_success(self, hook_ctx: AfterSuccessContext, response: Response) -> Response:
        for hook in self._after_success_hooks:
            response = await hook.after_success(hook_ctx, response)
        return response

    async def after_error(
        self,
        hook_ctx: AfterErrorContext,
        response: Response | None,
        error: Any,
    ) -> tuple[Response | None, Any]:
        for hook in self._after_error_hooks:
            response, error = await hook.after_error(hook_ctx, response, error)
        return response, error

    def release(self, operation_id: str) -> None:
        """Let every hook drop per-call state of an abandoned call."""
        for hook in self._release_hooks:
            hook.release(operation_id)
