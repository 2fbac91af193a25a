"""Shipment domain events — immutable facts about the registry.

Every event names the shipment by its integer id and is versioned so
downstream observers can evolve independently.
"""

from protean.fields import DateTime, Integer, String

from tracking.domain import tracking


@tracking.event(part_of="Shipment")
class ShipmentCreated:
    """A shipment was registered at its first location."""

    __version__ = 1

    shipment_id = Integer(required=True)
    location = String(required=True, max_length=100, sanitize=False)
    created_at = DateTime(required=True)


@tracking.event(part_of="Shipment")
class ShipmentStateChanged:
    """A shipment moved to a new lifecycle state.

    ``location`` is the location in effect after the change, which is the
    previous one when the caller did not supply a new location.
    """

    __version__ = 1

    shipment_id = Integer(required=True)
    state = String(required=True, max_length=20)
    location = String(required=True, max_length=100, sanitize=False)
    changed_at = DateTime(required=True)


@tracking.event(part_of="Shipment")
class ShipmentCancelled:
    """A shipment was cancelled by a manager or the administrator."""

    __version__ = 1

    shipment_id = Integer(required=True)
    cancelled_at = DateTime(required=True)
