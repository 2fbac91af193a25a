"""Shipment registration — command and handler."""

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from tracking.access.access_control import authorize
from tracking.access.roles import require_access_control
from tracking.domain import tracking
from tracking.shipment.sequence import ShipmentSequence, load_sequence
from tracking.shipment.shipment import Shipment
from tracking.utils.logging import get_logger

logger = get_logger(__name__)


@tracking.command(part_of="Shipment")
class AddShipment:
    """Register a new shipment at its first location."""

    caller = Identifier(required=True)
    location = Text(sanitize=False)  # length is checked by the aggregate


@tracking.command_handler(part_of=Shipment)
class AddShipmentHandler:
    @handle(AddShipment)
    def add_shipment(self, command):
        ac = require_access_control(command.caller)
        authorize(ac.is_manager_or_admin(command.caller), command.caller, "add shipments")

        sequence = load_sequence()
        shipment = Shipment.register(shipment_id=sequence.next_id, location=command.location)
        sequence.allocate()

        current_domain.repository_for(Shipment).add(shipment)
        current_domain.repository_for(ShipmentSequence).add(sequence)
        logger.info("Shipment added", shipment_id=shipment.shipment_id, location=shipment.location)
        return shipment.shipment_id
