"""Application tests for the custody log handlers — one log line per notification."""

from datetime import UTC, datetime

import pytest
from tracking import custody_log
from tracking.access.events import EmployeeRemoved, ManagerAdded, OwnershipTransferred
from tracking.custody_log import AccessControlCustodyLog, ShipmentCustodyLog
from tracking.shipment.events import ShipmentCancelled, ShipmentCreated, ShipmentStateChanged


class _RecordingLogger:
    def __init__(self):
        self.lines = []

    def info(self, message, **kwargs):
        self.lines.append((message, kwargs))


@pytest.fixture()
def log(monkeypatch):
    recorder = _RecordingLogger()
    monkeypatch.setattr(custody_log, "logger", recorder)
    return recorder


class TestAccessControlCustodyLog:
    def test_logs_ownership_transfer(self, log):
        AccessControlCustodyLog().on_ownership_transferred(
            OwnershipTransferred(previous_admin="0xA11CE", new_admin="0xB0B")
        )
        assert log.lines == [
            ("custody.ownership_transferred", {"previous_admin": "0xA11CE", "new_admin": "0xB0B"}),
        ]

    def test_logs_manager_added(self, log):
        AccessControlCustodyLog().on_manager_added(ManagerAdded(principal="0xB0B"))
        assert log.lines == [("custody.manager_added", {"principal": "0xB0B"})]

    def test_logs_employee_removed(self, log):
        AccessControlCustodyLog().on_employee_removed(EmployeeRemoved(principal="0xCA401"))
        assert log.lines == [("custody.employee_removed", {"principal": "0xCA401"})]


class TestShipmentCustodyLog:
    def test_logs_creation(self, log):
        ShipmentCustodyLog().on_shipment_created(
            ShipmentCreated(shipment_id=1, location="Rotterdam, NL", created_at=datetime.now(UTC))
        )
        assert log.lines == [("custody.shipment_created", {"shipment_id": 1, "location": "Rotterdam, NL"})]

    def test_logs_state_change(self, log):
        ShipmentCustodyLog().on_shipment_state_changed(
            ShipmentStateChanged(
                shipment_id=1,
                state="Arrived",
                location="Antwerp, BE",
                changed_at=datetime.now(UTC),
            )
        )
        message, fields = log.lines[0]
        assert message == "custody.shipment_state_changed"
        assert fields == {"shipment_id": 1, "state": "Arrived", "location": "Antwerp, BE"}

    def test_logs_cancellation(self, log):
        ShipmentCustodyLog().on_shipment_cancelled(ShipmentCancelled(shipment_id=3, cancelled_at=datetime.now(UTC)))
        assert log.lines == [("custody.shipment_cancelled", {"shipment_id": 3})]
