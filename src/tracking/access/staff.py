"""Staff membership — commands and handler.

The administrator hires and fires managers. Managers (and the administrator)
hire employees, and any employee, manager or the administrator may fire an
employee.
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
class AddManager:
    caller = Identifier(required=True)
    principal = Identifier(required=True)


@tracking.command(part_of="AccessControl")
class FireManager:
    caller = Identifier(required=True)
    principal = Identifier(required=True)


@tracking.command(part_of="AccessControl")
class AddEmployee:
    caller = Identifier(required=True)
    principal = Identifier(required=True)


@tracking.command(part_of="AccessControl")
class FireEmployee:
    caller = Identifier(required=True)
    principal = Identifier(required=True)


@tracking.command_handler(part_of=AccessControl)
class StaffHandler:
    @handle(AddManager)
    def add_manager(self, command):
        ac = require_access_control(command.caller)
        ac.add_manager(command.caller, command.principal)
        current_domain.repository_for(AccessControl).add(ac)
        logger.info("Manager added", principal=command.principal, by=command.caller)

    @handle(FireManager)
    def fire_manager(self, command):
        ac = require_access_control(command.caller)
        ac.fire_manager(command.caller, command.principal)
        current_domain.repository_for(AccessControl).add(ac)
        logger.info("Manager removed", principal=command.principal, by=command.caller)

    @handle(AddEmployee)
    def add_employee(self, command):
        ac = require_access_control(command.caller)
        ac.add_employee(command.caller, command.principal)
        current_domain.repository_for(AccessControl).add(ac)
        logger.info("Employee added", principal=command.principal, by=command.caller)

    @handle(FireEmployee)
    def fire_employee(self, command):
        ac = require_access_control(command.caller)
        ac.fire_employee(command.caller, command.principal)
        current_domain.repository_for(AccessControl).add(ac)
        logger.info("Employee removed", principal=command.principal, by=command.caller)
