"""Tracking bounded context — custody of shipments under role-based access control.

Two aggregates share the context: ``AccessControl`` owns the administrator,
the pending ownership candidate and the staff memberships, and ``Shipment``
owns a single record in the shipment registry. Every command that mutates a
shipment is gated by a role predicate answered by the access-control side.
"""

from protean.domain import Domain

from tracking.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

tracking = Domain(name="tracking")
