"""Access-control domain events — the custody trail of who holds authority.

All events are past tense and versioned. Principals are carried verbatim as
the opaque tokens supplied by the hosting environment.
"""

from protean.fields import Identifier

from tracking.domain import tracking


@tracking.event(part_of="AccessControl")
class OwnershipTransferStarted:
    """The administrator nominated a successor; authority has not moved yet."""

    __version__ = 1

    previous_admin = Identifier(required=True)
    candidate = Identifier(required=True)


@tracking.event(part_of="AccessControl")
class OwnershipTransferred:
    """Administrator authority moved to a new principal.

    ``previous_admin`` is empty when the access-control record is first
    established.
    """

    __version__ = 1

    previous_admin = Identifier()
    new_admin = Identifier(required=True)


@tracking.event(part_of="AccessControl")
class ManagerAdded:
    __version__ = 1

    principal = Identifier(required=True)


@tracking.event(part_of="AccessControl")
class ManagerRemoved:
    __version__ = 1

    principal = Identifier(required=True)


@tracking.event(part_of="AccessControl")
class EmployeeAdded:
    __version__ = 1

    principal = Identifier(required=True)


@tracking.event(part_of="AccessControl")
class EmployeeRemoved:
    __version__ = 1

    principal = Identifier(required=True)
