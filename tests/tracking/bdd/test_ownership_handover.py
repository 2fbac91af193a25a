"""BDD tests for the two-phase administrator handover."""

import pytest
from protean import current_domain
from pytest_bdd import parsers, scenarios, then, when
from tracking import errors
from tracking.access import roles
from tracking.access.ownership import AcceptOwnership, TransferOwnership
from tracking.access.staff import AddManager


scenarios("features/ownership_handover.feature")


def process(command):
    return current_domain.process(command, asynchronous=False)


@when(parsers.cfparse('"{caller}" nominates "{candidate}" as administrator'))
def nominate(caller, candidate):
    process(TransferOwnership(caller=caller, candidate=candidate))


@when(parsers.cfparse('"{caller}" accepts ownership'))
def accept(caller):
    process(AcceptOwnership(caller=caller))


@when(parsers.cfparse('"{caller}" tries to accept ownership'))
def try_accept(caller, attempt):
    attempt(AcceptOwnership(caller=caller))


@then(parsers.cfparse('"{principal}" is the administrator'))
def is_administrator(principal):
    assert roles.current_admin() == principal
    assert roles.is_admin(principal)


@then(parsers.cfparse('adding "{principal}" as manager by "{caller}" fails with {error_name}'))
def adding_manager_fails(principal, caller, error_name):
    with pytest.raises(getattr(errors, error_name)):
        process(AddManager(caller=caller, principal=principal))
