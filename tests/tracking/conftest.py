import os

import pytest


@pytest.fixture(scope="session")
def _tracking_domain(request):
    """Initialize the tracking domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from tracking.domain import tracking

    tracking.init()
    return tracking


@pytest.fixture(scope="session", autouse=True)
def setup_db(_tracking_domain):
    from tracking.utils.db import drop_db, setup_db

    setup_db(_tracking_domain)

    yield

    drop_db(_tracking_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_tracking_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _tracking_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture()
def admin():
    return "0xA11CE"


@pytest.fixture()
def established(admin):
    """Access control established with ``admin`` as administrator."""
    from protean import current_domain
    from tracking.access.establishment import EstablishAccessControl

    current_domain.process(EstablishAccessControl(admin=admin), asynchronous=False)
    return admin
