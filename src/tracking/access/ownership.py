"""Administrator handover — commands and handler.

The handover is two-phase: the administrator nominates a candidate, and the
candidate must accept before authority moves.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from tracking.access.access_control import AccessControl
from tracking.access.roles import require_access_control
from tracking.domain import tracking
from tracking.utils.logging import get_logger

logger = get_logger(__name__)


@tracking.command(part_of="AccessControl")
class TransferOwnership:
    """Nominate a successor administrator."""

    caller = Identifier(required=True)
    candidate = Identifier(required=True)


@tracking.command(part_of="AccessControl")
class AcceptOwnership:
    """Accept a pending nomination and become administrator."""

    caller = Identifier(required=True)


@tracking.command_handler(part_of=AccessControl)
class OwnershipHandler:
    @handle(TransferOwnership)
    def transfer_ownership(self, command):
        ac = require_access_control(command.caller)
        ac.transfer_ownership(command.caller, command.candidate)
        current_domain.repository_for(AccessControl).add(ac)
        logger.info("Ownership transfer started", admin=ac.admin, candidate=command.candidate)

    @handle(AcceptOwnership)
    def accept_ownership(self, command):
        ac = require_access_control(command.caller)
        previous_admin = ac.admin
        ac.accept_ownership(command.caller)
        current_domain.repository_for(AccessControl).add(ac)
        logger.info("Ownership transferred", previous_admin=previous_admin, new_admin=ac.admin)
