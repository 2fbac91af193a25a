"""Role lookups against the stored access-control record.

These are the yes/no questions the shipment registry asks before it touches
its own data. Until the record is established nobody holds any role.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from tracking.access.access_control import ACCESS_CONTROL_ID, AccessControl, Role
from tracking.errors import Unauthorized


def load_access_control() -> AccessControl | None:
    try:
        return current_domain.repository_for(AccessControl).get(ACCESS_CONTROL_ID)
    except ObjectNotFoundError:
        return None


def is_admin(principal: str) -> bool:
    ac = load_access_control()
    return ac is not None and ac.is_admin(principal)


def is_manager_or_admin(principal: str) -> bool:
    ac = load_access_control()
    return ac is not None and ac.is_manager_or_admin(principal)


def is_employee_manager_or_admin(principal: str) -> bool:
    ac = load_access_control()
    return ac is not None and ac.is_employee_manager_or_admin(principal)


def roles_of(principal: str) -> set[Role]:
    ac = load_access_control()
    return ac.roles_of(principal) if ac is not None else set()


def current_admin() -> str | None:
    ac = load_access_control()
    return ac.admin if ac is not None else None


def pending_admin() -> str | None:
    ac = load_access_control()
    return ac.pending_admin if ac is not None else None


def require_access_control(caller: str) -> AccessControl:
    """Load the access-control record for a gated operation.

    A caller cannot hold any role before the record exists, so a missing
    record is reported as ``Unauthorized``.
    """
    ac = load_access_control()
    if ac is None:
        raise Unauthorized({"caller": [f"{caller} holds no role: access control is not established"]})
    return ac
