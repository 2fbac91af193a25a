"""Shipment cancellation — command and handler.

Only managers and the administrator may cancel, and only shipments that are
not yet delivered or cancelled.
"""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from tracking.access.access_control import authorize
from tracking.access.roles import require_access_control
from tracking.domain import tracking
from tracking.shipment.shipment import Shipment
from tracking.shipment.status import get_shipment
from tracking.utils.logging import get_logger

logger = get_logger(__name__)


@tracking.command(part_of="Shipment")
class CancelShipment:
    caller = Identifier(required=True)
    shipment_id = Integer(required=True)


@tracking.command_handler(part_of=Shipment)
class CancelShipmentHandler:
    @handle(CancelShipment)
    def cancel_shipment(self, command):
        ac = require_access_control(command.caller)
        authorize(ac.is_manager_or_admin(command.caller), command.caller, "cancel shipments")

        shipment = get_shipment(command.shipment_id)
        shipment.cancel()
        current_domain.repository_for(Shipment).add(shipment)
        logger.info("Shipment cancelled", shipment_id=shipment.shipment_id)
