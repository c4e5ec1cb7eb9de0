"""Exceptions raised by the Runscope Radar client."""

from collections.abc import Sequence


class RunscopeError(RuntimeError):
    """Base class for all client errors."""


class TransportError(RunscopeError):
    """HTTP-layer failure, including any non-2xx response."""

    def __init__(
        self, message: str, status: int | None = None, body: str | None = None
    ) -> None:
        """Initialize with the status code and response body when known."""
        super().__init__(message)
        self.status = status
        self.body = body


class DecodeError(RunscopeError):
    """Response body does not match the expected schema."""


class EncodeError(RunscopeError):
    """Request payload could not be serialized."""


class InvalidFilterError(RunscopeError, ValueError):
    """Result filter parameters violate the count or since/before rules."""


class InvalidArgumentError(RunscopeError, ValueError):
    """A caller-supplied argument cannot be used to build a request."""


class IncompleteListError(RunscopeError):
    """A page failed while listing a whole collection.

    ``items`` holds every record fetched before the failing page, and the
    original error is chained as ``__cause__``.
    """

    def __init__(self, items: Sequence[object], cause: RunscopeError) -> None:
        """Initialize with the accumulated prefix and the failing error."""
        super().__init__(f"Listing stopped after {len(items)} records: {cause}")
        self.items = list(items)
        self.cause = cause
