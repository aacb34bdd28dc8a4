"""Request/response hooks run by the client pipeline."""

from .registry import SDKHooks
from .split_pdf import SplitPdfHook
from .types import (
    AfterErrorContext,
    AfterErrorHook,
    AfterSuccessContext,
    AfterSuccessHook,
    BeforeRequestContext,
    BeforeRequestHook,
    HookContext,
    ReleaseHook,
    SDKInitHook,
    SDKInitOptions,
    Transport,
)

__all__ = [
    "SDKHooks",
    "SplitPdfHook",
    "HookContext",
    "BeforeRequestContext",
    "AfterSuccessContext",
    "AfterErrorContext",
    "SDKInitOptions",
    "SDKInitHook",
    "BeforeRequestHook",
    "AfterSuccessHook",
    "AfterErrorHook",
    "ReleaseHook",
    "Transport",
]
