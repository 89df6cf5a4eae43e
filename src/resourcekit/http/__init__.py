"""HTTP message types for resourcekit.

This module provides the small request/response abstraction that resources
and the JSON codec are written against.
"""

from .messages import (
    HeaderMap,
    HttpRequest,
    HttpResponse,
    ResponseWriter,
    error,
    read_body,
    render_response,
)

__all__ = [
    "HeaderMap",
    "HttpRequest",
    "HttpResponse",
    "ResponseWriter",
    "error",
    "read_body",
    "render_response",
]
