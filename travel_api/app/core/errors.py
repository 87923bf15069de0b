"""
Exceptions raised by the service layer.

Services signal rejected operations with one of the subclasses below;
endpoints translate them into HTTP responses.  The message passed to
the constructor is meant to be shown to the API caller as is.
"""


class TravelError(Exception):
    """Base exception for all rejected travel operations."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(TravelError):
    """A referenced client, trip or registration does not exist."""


class ConflictError(TravelError):
    """The operation clashes with existing state (duplicate or full trip)."""


class ValidationError(TravelError):
    """Input data is malformed."""
