"""Custody log — in-process observers of every tracking notification.

Each handler writes one structured log line per event so the custody trail
can be followed in the service logs. Delivery of the same events to external
subscribers is left to protean's broker and engine.
"""

import structlog
from protean.utils.mixins import handle

from tracking.access.access_control import AccessControl
from tracking.access.events import (
    EmployeeAdded,
    EmployeeRemoved,
    ManagerAdded,
    ManagerRemoved,
    OwnershipTransferred,
    OwnershipTransferStarted,
)
from tracking.domain import tracking
from tracking.shipment.events import ShipmentCancelled, ShipmentCreated, ShipmentStateChanged
from tracking.shipment.shipment import Shipment

logger = structlog.get_logger(__name__)


@tracking.event_handler(part_of=AccessControl)
class AccessControlCustodyLog:
    @handle(OwnershipTransferStarted)
    def on_ownership_transfer_started(self, event: OwnershipTransferStarted) -> None:
        logger.info(
            "custody.ownership_transfer_started",
            previous_admin=event.previous_admin,
            candidate=event.candidate,
        )

    @handle(OwnershipTransferred)
    def on_ownership_transferred(self, event: OwnershipTransferred) -> None:
        logger.info(
            "custody.ownership_transferred",
            previous_admin=event.previous_admin,
            new_admin=event.new_admin,
        )

    @handle(ManagerAdded)
    def on_manager_added(self, event: ManagerAdded) -> None:
        logger.info("custody.manager_added", principal=event.principal)

    @handle(ManagerRemoved)
    def on_manager_removed(self, event: ManagerRemoved) -> None:
        logger.info("custody.manager_removed", principal=event.principal)

    @handle(EmployeeAdded)
    def on_employee_added(self, event: EmployeeAdded) -> None:
        logger.info("custody.employee_added", principal=event.principal)

    @handle(EmployeeRemoved)
    def on_employee_removed(self, event: EmployeeRemoved) -> None:
        logger.info("custody.employee_removed", principal=event.principal)


@tracking.event_handler(part_of=Shipment)
class ShipmentCustodyLog:
    @handle(ShipmentCreated)
    def on_shipment_created(self, event: ShipmentCreated) -> None:
        logger.info(
            "custody.shipment_created",
            shipment_id=event.shipment_id,
            location=event.location,
        )

    @handle(ShipmentStateChanged)
    def on_shipment_state_changed(self, event: ShipmentStateChanged) -> None:
        logger.info(
            "custody.shipment_state_changed",
            shipment_id=event.shipment_id,
            state=event.state,
            location=event.location,
        )

    @handle(ShipmentCancelled)
    def on_shipment_cancelled(self, event: ShipmentCancelled) -> None:
        logger.info("custody.shipment_cancelled", shipment_id=event.shipment_id)
