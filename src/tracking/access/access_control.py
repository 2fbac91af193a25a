"""AccessControl aggregate — who may act on the shipment registry.

A single AccessControl record exists per deployment. It holds the one
administrator, an optional pending successor, and the staff memberships.

Authority:
    Administrator ⊇ Manager ⊇ Employee

Managers and employees are independent sets: a principal may be a manager,
an employee, both or neither. The administrator passes every role check.

Ownership moves in two phases. The administrator nominates a candidate with
``transfer_ownership``; authority only moves once the candidate confirms with
``accept_ownership``. A new nomination overwrites the previous one.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, HasMany, Identifier, String

from tracking.access.events import (
    EmployeeAdded,
    EmployeeRemoved,
    ManagerAdded,
    ManagerRemoved,
    OwnershipTransferred,
    OwnershipTransferStarted,
)
from tracking.domain import tracking
from tracking.errors import AlreadyExists, NotFound, Unauthorized
from tracking.utils.logging import get_logger

logger = get_logger(__name__)

ACCESS_CONTROL_ID = "access-control"


def authorize(allowed: bool, caller: str, action: str) -> None:
    """Raise ``Unauthorized`` and log the denial unless ``allowed``."""
    if not allowed:
        logger.warning("Operation denied", caller=caller, action=action)
        raise Unauthorized({"caller": [f"{caller} is not allowed to {action}"]})


class Role(Enum):
    ADMIN = "Admin"
    MANAGER = "Manager"
    EMPLOYEE = "Employee"


@tracking.entity(part_of="AccessControl")
class Membership:
    """A principal's standing as manager or employee."""

    principal = Identifier(required=True)
    role = String(required=True, max_length=20, choices=Role)


@tracking.aggregate
class AccessControl:
    admin = Identifier(required=True)
    pending_admin = Identifier()
    memberships = HasMany(Membership)
    established_at = DateTime()

    @classmethod
    def establish(cls, admin: str):
        """Create the access-control record with ``admin`` as its first administrator."""
        ac = cls(id=ACCESS_CONTROL_ID, admin=admin, established_at=datetime.now(UTC))
        ac.raise_(OwnershipTransferred(previous_admin=None, new_admin=admin))
        return ac

    # -------------------------------------------------------------------
    # Role predicates
    # -------------------------------------------------------------------
    def is_admin(self, principal: str) -> bool:
        return principal == self.admin

    def is_manager_or_admin(self, principal: str) -> bool:
        return self.is_admin(principal) or self._membership(principal, Role.MANAGER) is not None

    def is_employee_manager_or_admin(self, principal: str) -> bool:
        return self.is_manager_or_admin(principal) or self._membership(principal, Role.EMPLOYEE) is not None

    def roles_of(self, principal: str) -> set[Role]:
        roles = {Role(m.role) for m in (self.memberships or []) if m.principal == principal}
        if self.is_admin(principal):
            roles.add(Role.ADMIN)
        return roles

    def _membership(self, principal: str, role: Role) -> Membership | None:
        return next(
            (m for m in (self.memberships or []) if m.principal == principal and m.role == role.value),
            None,
        )

    # -------------------------------------------------------------------
    # Ownership
    # -------------------------------------------------------------------
    def transfer_ownership(self, caller: str, candidate: str) -> None:
        """Nominate ``candidate`` as the next administrator, replacing any earlier nomination."""
        authorize(self.is_admin(caller), caller, "transfer ownership")

        self.pending_admin = candidate
        self.raise_(OwnershipTransferStarted(previous_admin=self.admin, candidate=candidate))

    def accept_ownership(self, caller: str) -> None:
        """Complete the handover. Only the pending candidate may accept."""
        authorize(bool(self.pending_admin) and caller == self.pending_admin, caller, "accept ownership")

        previous_admin = self.admin
        self.admin = caller
        self.pending_admin = None
        self.raise_(OwnershipTransferred(previous_admin=previous_admin, new_admin=caller))

    # -------------------------------------------------------------------
    # Staff
    # -------------------------------------------------------------------
    def add_manager(self, caller: str, principal: str) -> None:
        authorize(self.is_admin(caller), caller, "add managers")
        self._enroll(principal, Role.MANAGER)
        self.raise_(ManagerAdded(principal=principal))

    def fire_manager(self, caller: str, principal: str) -> None:
        authorize(self.is_admin(caller), caller, "fire managers")
        self._dismiss(principal, Role.MANAGER)
        self.raise_(ManagerRemoved(principal=principal))

    def add_employee(self, caller: str, principal: str) -> None:
        authorize(self.is_manager_or_admin(caller), caller, "add employees")
        self._enroll(principal, Role.EMPLOYEE)
        self.raise_(EmployeeAdded(principal=principal))

    def fire_employee(self, caller: str, principal: str) -> None:
        """Remove an employee.

        Any employee may remove any employee, itself included, not only
        managers and the administrator.
        """
        authorize(self.is_employee_manager_or_admin(caller), caller, "fire employees")
        self._dismiss(principal, Role.EMPLOYEE)
        self.raise_(EmployeeRemoved(principal=principal))

    def _enroll(self, principal: str, role: Role) -> None:
        if self._membership(principal, role) is not None:
            raise AlreadyExists({"principal": [f"{principal} is already a {role.value.lower()}"]})
        self.add_memberships(Membership(principal=principal, role=role.value))

    def _dismiss(self, principal: str, role: Role) -> None:
        membership = self._membership(principal, role)
        if membership is None:
            raise NotFound({"principal": [f"{principal} is not a {role.value.lower()}"]})
        self.remove_memberships(membership)
