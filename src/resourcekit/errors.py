"""Exceptions raised by resourcekit."""

from pydantic import ValidationError


class ResourceKitError(Exception):
    """Base class for resourcekit errors."""
    pass


class SerializationError(ResourceKitError, ValueError):
    """Raised when a value cannot be encoded as JSON. Nothing was written."""
    pass


# Decoding failures (malformed JSON, schema mismatch) surface as pydantic's own
# error, unwrapped.
DeserializationError = ValidationError
