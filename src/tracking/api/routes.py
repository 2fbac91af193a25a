"""FastAPI routes for the Tracking domain.

Every mutating route forwards the authenticated principal from the
``X-Principal`` header into the command as ``caller``.
"""

from fastapi import APIRouter, Header, HTTPException
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from tracking.access import roles
from tracking.access.establishment import EstablishAccessControl
from tracking.access.ownership import AcceptOwnership, TransferOwnership
from tracking.access.staff import AddEmployee, AddManager, FireEmployee, FireManager
from tracking.api.schemas import (
    AccessControlResponse,
    AddShipmentRequest,
    ChangeShipmentStateRequest,
    EstablishAccessControlRequest,
    RolesResponse,
    ShipmentIdResponse,
    ShipmentStatusResponse,
    StaffRequest,
    StatusResponse,
    TransferOwnershipRequest,
)
from tracking.errors import AlreadyExists, InvalidState, TrackingError, Unauthorized
from tracking.shipment.cancellation import CancelShipment
from tracking.shipment.creation import AddShipment
from tracking.shipment.status import check_shipment_status
from tracking.shipment.transition import ChangeShipmentState
from tracking.utils.logging import bind_principal, get_logger

logger = get_logger(__name__)

_STATUS_CODES = {
    Unauthorized: 403,
    AlreadyExists: 409,
    InvalidState: 409,
}


def _status_code_for(exc: Exception) -> int:
    for error_cls, status_code in _STATUS_CODES.items():
        if isinstance(exc, error_cls):
            return status_code
    if isinstance(exc, ObjectNotFoundError):
        return 404
    return 422


def _process(command):
    """Process ``command`` synchronously, translating rejections into HTTP errors."""
    try:
        return current_domain.process(command, asynchronous=False)
    except (TrackingError, ObjectNotFoundError, ValidationError) as exc:
        status_code = _status_code_for(exc)
        logger.warning(
            "Command rejected",
            command=type(command).__name__,
            error=type(exc).__name__,
            status_code=status_code,
        )
        raise HTTPException(status_code=status_code, detail=exc.messages) from exc


def _build(command_cls, **kwargs):
    """Instantiate a command, reporting field validation failures as 422."""
    try:
        return command_cls(**kwargs)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.messages) from exc


# ---------------------------------------------------------------------------
# Access Control Router
# ---------------------------------------------------------------------------
access_control_router = APIRouter(prefix="/access-control", tags=["access-control"])


@access_control_router.post("", status_code=201, response_model=StatusResponse)
async def establish_access_control(body: EstablishAccessControlRequest) -> StatusResponse:
    """Establish the access-control record with its first administrator."""
    _process(_build(EstablishAccessControl, admin=body.admin))
    return StatusResponse(status="established")


@access_control_router.get("", response_model=AccessControlResponse)
async def get_access_control() -> AccessControlResponse:
    """Current administrator and pending candidate, if any."""
    return AccessControlResponse(admin=roles.current_admin(), pending_admin=roles.pending_admin())


@access_control_router.get("/roles/{principal}", response_model=RolesResponse)
async def get_roles(principal: str) -> RolesResponse:
    held = roles.roles_of(principal)
    return RolesResponse(principal=principal, roles=sorted(role.value for role in held))


@access_control_router.put("/ownership/transfer", response_model=StatusResponse)
async def transfer_ownership(
    body: TransferOwnershipRequest,
    x_principal: str = Header(),
) -> StatusResponse:
    """Nominate a successor administrator."""
    bind_principal(x_principal)
    _process(_build(TransferOwnership, caller=x_principal, candidate=body.candidate))
    return StatusResponse(status="transfer_started")


@access_control_router.put("/ownership/accept", response_model=StatusResponse)
async def accept_ownership(x_principal: str = Header()) -> StatusResponse:
    """Accept a pending nomination."""
    bind_principal(x_principal)
    _process(_build(AcceptOwnership, caller=x_principal))
    return StatusResponse(status="ownership_transferred")


@access_control_router.post("/managers", status_code=201, response_model=StatusResponse)
async def add_manager(body: StaffRequest, x_principal: str = Header()) -> StatusResponse:
    bind_principal(x_principal)
    _process(_build(AddManager, caller=x_principal, principal=body.principal))
    return StatusResponse(status="manager_added")


@access_control_router.delete("/managers/{principal}", response_model=StatusResponse)
async def fire_manager(principal: str, x_principal: str = Header()) -> StatusResponse:
    bind_principal(x_principal)
    _process(_build(FireManager, caller=x_principal, principal=principal))
    return StatusResponse(status="manager_removed")


@access_control_router.post("/employees", status_code=201, response_model=StatusResponse)
async def add_employee(body: StaffRequest, x_principal: str = Header()) -> StatusResponse:
    bind_principal(x_principal)
    _process(_build(AddEmployee, caller=x_principal, principal=body.principal))
    return StatusResponse(status="employee_added")


@access_control_router.delete("/employees/{principal}", response_model=StatusResponse)
async def fire_employee(principal: str, x_principal: str = Header()) -> StatusResponse:
    bind_principal(x_principal)
    _process(_build(FireEmployee, caller=x_principal, principal=principal))
    return StatusResponse(status="employee_removed")


# ---------------------------------------------------------------------------
# Shipment Router
# ---------------------------------------------------------------------------
shipment_router = APIRouter(prefix="/shipments", tags=["shipments"])


@shipment_router.post("", status_code=201, response_model=ShipmentIdResponse)
async def add_shipment(body: AddShipmentRequest, x_principal: str = Header()) -> ShipmentIdResponse:
    """Register a new shipment at its first location."""
    bind_principal(x_principal)
    shipment_id = _process(_build(AddShipment, caller=x_principal, location=body.location))
    return ShipmentIdResponse(shipment_id=shipment_id)


@shipment_router.put("/{shipment_id}/state", response_model=StatusResponse)
async def change_shipment_state(
    shipment_id: int,
    body: ChangeShipmentStateRequest,
    x_principal: str = Header(),
) -> StatusResponse:
    """Move a shipment to another state, optionally at a new location."""
    bind_principal(x_principal)
    command = _build(
        ChangeShipmentState,
        caller=x_principal,
        shipment_id=shipment_id,
        state=body.state,
        location=body.location,
    )
    _process(command)
    return StatusResponse(status="state_changed")


@shipment_router.put("/{shipment_id}/cancel", response_model=StatusResponse)
async def cancel_shipment(shipment_id: int, x_principal: str = Header()) -> StatusResponse:
    bind_principal(x_principal)
    _process(_build(CancelShipment, caller=x_principal, shipment_id=shipment_id))
    return StatusResponse(status="cancelled")


@shipment_router.get("/{shipment_id}", response_model=ShipmentStatusResponse)
async def get_shipment_status(shipment_id: int) -> ShipmentStatusResponse:
    """Current state and location of a shipment. Open to everyone."""
    try:
        status = check_shipment_status(shipment_id)
    except ObjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail=exc.messages) from exc
    return ShipmentStatusResponse(
        shipment_id=status.shipment_id,
        state=status.state,
        location=status.location,
    )
