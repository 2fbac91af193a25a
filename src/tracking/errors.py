"""Failure reasons reported by tracking operations.

Every error carries a protean-style ``messages`` dict mapping a field name to
a list of human-readable messages. ``NotFound`` and ``InvalidInput`` also
derive from their protean counterparts so callers that only know protean's
exceptions still catch them.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class TrackingError(Exception):
    """Base class for every rejected tracking operation."""

    def __init__(self, messages: dict[str, list[str]]):
        super().__init__(messages)
        self.messages = messages


class Unauthorized(TrackingError):
    """Caller lacks the role the operation requires."""


class AlreadyExists(TrackingError):
    """Membership (or the access-control record itself) is already present."""


class NotFound(TrackingError, ObjectNotFoundError):
    """Membership or shipment does not exist."""


class InvalidState(TrackingError):
    """Shipment is in a terminal state."""


class InvalidInput(TrackingError, ValidationError):
    """Argument failed validation."""
