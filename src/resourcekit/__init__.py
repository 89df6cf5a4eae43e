"""Small async HTTP helpers: JSON codec plus per-method resources."""

from .http.messages import HeaderMap, HttpRequest, HttpResponse, ResponseWriter, error, read_body
from .codec import decode_request, dumps, encode_response
from .resource import Handler, Resource
from .errors import DeserializationError, ResourceKitError, SerializationError
from .config import Settings, get_settings
from .logging_setup import setup_logging

__all__ = [
    # HTTP messages
    "HeaderMap",
    "HttpRequest",
    "HttpResponse",
    "ResponseWriter",
    "error",
    "read_body",
    # Codec
    "dumps",
    "encode_response",
    "decode_request",
    # Resources
    "Handler",
    "Resource",
    # Errors
    "ResourceKitError",
    "SerializationError",
    "DeserializationError",
    # Config / logging
    "Settings",
    "get_settings",
    "setup_logging",
]
