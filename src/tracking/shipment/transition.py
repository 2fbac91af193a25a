"""Shipment state changes — command and handler.

Employees, managers and the administrator move shipments through the
lifecycle. Cancellation is not available here; see ``cancellation``.
"""

from protean import handle
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from tracking.access.access_control import authorize
from tracking.access.roles import require_access_control
from tracking.domain import tracking
from tracking.shipment.shipment import Shipment
from tracking.shipment.status import get_shipment
from tracking.utils.logging import get_logger

logger = get_logger(__name__)


@tracking.command(part_of="Shipment")
class ChangeShipmentState:
    """Move a shipment to another state, optionally at a new location."""

    caller = Identifier(required=True)
    shipment_id = Integer(required=True)
    state = String(required=True, max_length=20)
    location = Text(sanitize=False)  # omitted means "keep the current location"


@tracking.command_handler(part_of=Shipment)
class ShipmentTransitionHandler:
    @handle(ChangeShipmentState)
    def change_shipment_state(self, command):
        ac = require_access_control(command.caller)
        authorize(ac.is_employee_manager_or_admin(command.caller), command.caller, "change shipment state")

        shipment = get_shipment(command.shipment_id)
        shipment.change_state(command.state, location=command.location)
        current_domain.repository_for(Shipment).add(shipment)
        logger.info(
            "Shipment state changed",
            shipment_id=shipment.shipment_id,
            state=shipment.state,
            location=shipment.location,
        )
