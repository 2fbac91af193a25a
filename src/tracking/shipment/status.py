"""Shipment status lookup — the unrestricted read side of the registry."""

from dataclasses import dataclass

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from tracking.errors import NotFound
from tracking.shipment.shipment import Shipment


@dataclass(frozen=True)
class ShipmentStatus:
    """Current state and location of a shipment."""

    shipment_id: int
    state: str
    location: str


def get_shipment(shipment_id: int) -> Shipment:
    """Load a shipment, raising ``NotFound`` for ids that were never assigned."""
    if shipment_id is None or shipment_id < 1:
        raise NotFound({"shipment_id": [f"Shipment {shipment_id} does not exist"]})
    try:
        return current_domain.repository_for(Shipment).get(shipment_id)
    except ObjectNotFoundError as exc:
        raise NotFound({"shipment_id": [f"Shipment {shipment_id} does not exist"]}) from exc


def check_shipment_status(shipment_id: int) -> ShipmentStatus:
    shipment = get_shipment(shipment_id)
    return ShipmentStatus(
        shipment_id=shipment.shipment_id,
        state=shipment.state,
        location=shipment.location,
    )
