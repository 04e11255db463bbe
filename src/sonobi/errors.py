"""
Error kinds produced by the Sonobi adapter.

Adapter errors are exception instances that get collected into error
lists and handed back to the caller next to any partial output. The
builder and the mapper never raise them.
"""

from typing import Optional


class AdapterError(Exception):
    """Base class for errors returned by the adapter."""

    def __init__(self, message: str, imp_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.imp_id = imp_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdapterError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.message == other.message
            and self.imp_id == other.imp_id
        )

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.imp_id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, imp_id={self.imp_id!r})"


class MalformedExtensionError(AdapterError):
    """An impression's ext blob could not be decoded into bidder params."""
    pass


class InvalidBidderExtensionError(MalformedExtensionError):
    """imp.ext is not JSON or has no bidder object."""
    pass


class InvalidBidderParamsError(MalformedExtensionError):
    """The bidder object does not carry a usable TagID."""
    pass


class SerializationError(AdapterError):
    """An outbound request body could not be encoded."""
    pass


class BadInputError(AdapterError):
    """The request was malformed from the exchange's point of view."""
    pass


class BadServerResponseError(AdapterError):
    """The exchange answered with something the adapter cannot use."""
    pass


class ConfigurationError(Exception):
    """Raised when the adapter configuration is invalid."""
    pass
