"""Tests for Shipment domain events — each method raises the correct event."""

import pytest
from tracking.errors import InvalidState
from tracking.shipment.events import ShipmentCancelled, ShipmentCreated, ShipmentStateChanged
from tracking.shipment.shipment import Shipment, ShipmentState


def _make_shipment():
    return Shipment.register(shipment_id=7, location="Rotterdam, NL")


class TestShipmentCreatedEvent:
    def test_raises_event(self):
        shipment = _make_shipment()
        assert len(shipment._events) == 1
        assert isinstance(shipment._events[0], ShipmentCreated)

    def test_event_carries_id_and_location(self):
        event = _make_shipment()._events[0]
        assert event.shipment_id == 7
        assert event.location == "Rotterdam, NL"


class TestShipmentStateChangedEvent:
    def test_carries_new_state_and_location(self):
        shipment = _make_shipment()
        shipment.change_state(ShipmentState.IN_TRANSIT.value, location="Antwerp, BE")
        event = shipment._events[-1]
        assert isinstance(event, ShipmentStateChanged)
        assert event.shipment_id == 7
        assert event.state == ShipmentState.IN_TRANSIT.value
        assert event.location == "Antwerp, BE"

    def test_echoes_previous_location_when_omitted(self):
        shipment = _make_shipment()
        shipment.change_state(ShipmentState.SHIPPED.value)
        assert shipment._events[-1].location == "Rotterdam, NL"


class TestShipmentCancelledEvent:
    def test_raises_event(self):
        shipment = _make_shipment()
        shipment.cancel()
        event = shipment._events[-1]
        assert isinstance(event, ShipmentCancelled)
        assert event.shipment_id == 7

    def test_rejected_cancel_raises_no_event(self):
        shipment = _make_shipment()
        shipment.cancel()
        shipment._events.clear()
        with pytest.raises(InvalidState):
            shipment.cancel()
        assert shipment._events == []
