"""Raw wire objects used by the transport and hooks."""

from .messages import FormField, MultipartForm, Request, Response

__all__ = [
    "FormField",
    "MultipartForm",
    "Request",
    "Response",
]
