"""Shared BDD fixtures and step definitions for the Tracking domain."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then
from tracking import errors
from tracking.access import roles
from tracking.access.establishment import EstablishAccessControl
from tracking.access.staff import AddEmployee, AddManager
from tracking.errors import TrackingError
from tracking.shipment.status import check_shipment_status


def _process(command):
    return current_domain.process(command, asynchronous=False)


@pytest.fixture()
def error():
    """Container for the error captured by a "tries to" step."""
    return {"exc": None}


@pytest.fixture()
def attempt(error):
    """Process a command, capturing a rejection instead of raising it."""

    def _attempt(command):
        try:
            _process(command)
        except TrackingError as exc:
            error["exc"] = exc

    return _attempt


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('access control administered by "{admin}"'))
def access_control(admin):
    _process(EstablishAccessControl(admin=admin))


@given(parsers.cfparse('"{principal}" is a manager'))
def manager(principal):
    _process(AddManager(caller=roles.current_admin(), principal=principal))


@given(parsers.cfparse('"{principal}" is an employee'))
def employee(principal):
    _process(AddEmployee(caller=roles.current_admin(), principal=principal))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the attempt fails with {error_name}"))
def attempt_failed(error, error_name):
    assert isinstance(error["exc"], getattr(errors, error_name))


@then(parsers.cfparse('shipment {shipment_id:d} is "{state}" at "{location}"'))
def shipment_status(shipment_id, state, location):
    status = check_shipment_status(shipment_id)
    assert status.state == state
    assert status.location == location
