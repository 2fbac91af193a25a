"""Pydantic API schemas for the Tracking domain.

These are the external API contracts, separate from domain commands. The
caller's principal never appears in a body: it arrives in the ``X-Principal``
header set by the authenticating gateway.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------
class EstablishAccessControlRequest(BaseModel):
    admin: str = Field(min_length=1)


class TransferOwnershipRequest(BaseModel):
    candidate: str = Field(min_length=1)


class StaffRequest(BaseModel):
    principal: str = Field(min_length=1)


class AddShipmentRequest(BaseModel):
    location: str


class ChangeShipmentStateRequest(BaseModel):
    state: str
    # An empty string would read as "keep the current location" downstream.
    location: str | None = Field(default=None, min_length=1)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str


class AccessControlResponse(BaseModel):
    admin: str | None
    pending_admin: str | None


class RolesResponse(BaseModel):
    principal: str
    roles: list[str]


class ShipmentIdResponse(BaseModel):
    shipment_id: int


class ShipmentStatusResponse(BaseModel):
    shipment_id: int
    state: str
    location: str
