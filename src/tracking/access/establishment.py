"""Access-control establishment — command and handler.

Establishing the record names the first administrator. It happens once per
deployment; afterwards authority only moves through the ownership handover.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from tracking.access.access_control import AccessControl
from tracking.access.roles import load_access_control
from tracking.domain import tracking
from tracking.errors import AlreadyExists
from tracking.utils.logging import get_logger

logger = get_logger(__name__)


@tracking.command(part_of="AccessControl")
class EstablishAccessControl:
    """Create the access-control record with its first administrator."""

    admin = Identifier(required=True)


@tracking.command_handler(part_of=AccessControl)
class EstablishAccessControlHandler:
    @handle(EstablishAccessControl)
    def establish(self, command):
        if load_access_control() is not None:
            raise AlreadyExists({"access_control": ["Access control has already been established"]})

        ac = AccessControl.establish(admin=command.admin)
        current_domain.repository_for(AccessControl).add(ac)
        logger.info("Access control established", admin=command.admin)
        return str(ac.id)
