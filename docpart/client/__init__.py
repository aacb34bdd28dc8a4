"""docpart client - document partition API client with client-side PDF splitting."""

from .clients import PartitionClient
from .core import OperationStateError, PartitionError, SDKError
from .hooks import (
    AfterErrorContext,
    AfterSuccessContext,
    BeforeRequestContext,
    SDKHooks,
    SDKInitOptions,
    SplitPdfHook,
)
from .io import FormField, MultipartForm, Request, Response
from .models import PartitionResponse
from .utils import HTTPClient

__version__ = "0.1.0"

__all__ = [
    "PartitionClient",
    "PartitionResponse",
    "HTTPClient",
    "SDKHooks",
    "SplitPdfHook",
    "SDKInitOptions",
    "BeforeRequestContext",
    "AfterSuccessContext",
    "AfterErrorContext",
    "FormField",
    "MultipartForm",
    "Request",
    "Response",
    "PartitionError",
    "SDKError",
    "OperationStateError",
]
