"""Shipment aggregate — one record in the shipment registry.

State Machine:
    SHIPMENT_ADDED → SHIPPED → DISPATCHED → IN_TRANSIT → ARRIVED → OUT_FOR_DELIVERY → DELIVERED
    any non-terminal state → CANCELLED (cancellation path only)

The order above is the order of reachability, not an enforced sequence.
``change_state`` may move a live shipment to any state other than CANCELLED,
forwards, backwards or skipping ahead. Only two rules hold: DELIVERED and
CANCELLED are terminal, and CANCELLED is reached through ``cancel`` alone.
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, String

from tracking.domain import tracking
from tracking.errors import InvalidInput, InvalidState, Unauthorized
from tracking.shipment.events import ShipmentCancelled, ShipmentCreated, ShipmentStateChanged

LOCATION_MAX_LENGTH = 100


class ShipmentState(Enum):
    SHIPMENT_ADDED = "ShipmentAdded"
    SHIPPED = "Shipped"
    DISPATCHED = "Dispatched"
    IN_TRANSIT = "In_Transit"
    ARRIVED = "Arrived"
    OUT_FOR_DELIVERY = "OutForDelivery"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


_TERMINAL_STATES = {ShipmentState.DELIVERED, ShipmentState.CANCELLED}


def validate_location(location: str | None) -> str:
    """Return ``location`` if it is 1 to 100 characters long."""
    if not location:
        raise InvalidInput({"location": ["Location must not be empty"]})
    if len(location) > LOCATION_MAX_LENGTH:
        raise InvalidInput({"location": [f"Location must be at most {LOCATION_MAX_LENGTH} characters"]})
    return location


@tracking.aggregate
class Shipment:
    shipment_id = Integer(identifier=True, min_value=1)
    state = String(
        max_length=20,
        choices=ShipmentState,
        default=ShipmentState.SHIPMENT_ADDED.value,
    )
    location = String(required=True, max_length=LOCATION_MAX_LENGTH, sanitize=False)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def location_is_never_blank(self):
        if not self.location:
            raise ValidationError({"location": ["Location must not be empty"]})

    @classmethod
    def register(cls, shipment_id: int, location: str):
        """Register a new shipment under an id allocated by the ShipmentSequence."""
        validate_location(location)
        now = datetime.now(UTC)
        shipment = cls(
            shipment_id=shipment_id,
            state=ShipmentState.SHIPMENT_ADDED.value,
            location=location,
            created_at=now,
            updated_at=now,
        )
        shipment.raise_(
            ShipmentCreated(
                shipment_id=shipment_id,
                location=location,
                created_at=now,
            )
        )
        return shipment

    @property
    def is_terminal(self) -> bool:
        return ShipmentState(self.state) in _TERMINAL_STATES

    def _assert_not_terminal(self) -> None:
        if self.is_terminal:
            raise InvalidState({"state": [f"Shipment {self.shipment_id} is already {self.state}"]})

    def change_state(self, new_state: str, location: str | None = None) -> None:
        """Move to ``new_state``, optionally recording a new location.

        When ``location`` is omitted the current one is kept and echoed in
        the event.
        """
        self._assert_not_terminal()

        try:
            target = ShipmentState(new_state)
        except ValueError as exc:
            raise InvalidInput({"state": [f"Unknown shipment state {new_state!r}"]}) from exc
        if target == ShipmentState.CANCELLED:
            raise Unauthorized({"state": ["Shipments can only be cancelled through cancellation"]})

        if location is not None:
            validate_location(location)

        now = datetime.now(UTC)
        self.state = target.value
        if location is not None:
            self.location = location
        self.updated_at = now
        self.raise_(
            ShipmentStateChanged(
                shipment_id=self.shipment_id,
                state=target.value,
                location=self.location,
                changed_at=now,
            )
        )

    def cancel(self) -> None:
        """Cancel a live shipment. The location is left as it was."""
        self._assert_not_terminal()

        now = datetime.now(UTC)
        self.state = ShipmentState.CANCELLED.value
        self.updated_at = now
        self.raise_(ShipmentCancelled(shipment_id=self.shipment_id, cancelled_at=now))
