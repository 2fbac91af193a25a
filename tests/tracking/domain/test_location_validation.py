"""Tests for shipment location validation — 1 to 100 characters on every write."""

import pytest
from protean.exceptions import ValidationError
from tracking.errors import InvalidInput
from tracking.shipment.shipment import LOCATION_MAX_LENGTH, Shipment, validate_location


class TestValidateLocation:
    def test_accepts_single_character(self):
        assert validate_location("A") == "A"

    def test_accepts_maximum_length(self):
        location = "x" * LOCATION_MAX_LENGTH
        assert validate_location(location) == location

    def test_rejects_empty(self):
        with pytest.raises(InvalidInput) as exc_info:
            validate_location("")
        assert "location" in exc_info.value.messages

    def test_rejects_none(self):
        with pytest.raises(InvalidInput):
            validate_location(None)

    def test_rejects_over_maximum(self):
        with pytest.raises(InvalidInput):
            validate_location("x" * (LOCATION_MAX_LENGTH + 1))

    def test_invalid_input_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            validate_location("")


class TestRegisterValidation:
    def test_register_rejects_empty_location(self):
        with pytest.raises(InvalidInput):
            Shipment.register(shipment_id=1, location="")

    def test_register_rejects_long_location(self):
        with pytest.raises(InvalidInput):
            Shipment.register(shipment_id=1, location="x" * 101)


class TestLocationIsStoredVerbatim:
    def test_markup_characters_are_kept(self):
        shipment = Shipment.register(shipment_id=1, location="A & B <Dock 3>")
        assert shipment.location == "A & B <Dock 3>"
        assert shipment._events[0].location == "A & B <Dock 3>"

    def test_maximum_length_counts_raw_characters(self):
        location = "&" * LOCATION_MAX_LENGTH
        shipment = Shipment.register(shipment_id=1, location=location)
        assert shipment.location == location

    def test_state_change_keeps_markup_characters(self):
        shipment = Shipment.register(shipment_id=1, location="Rotterdam, NL")
        shipment.change_state("Arrived", location="Pier <7> & Gate")
        assert shipment.location == "Pier <7> & Gate"
        assert shipment._events[-1].location == "Pier <7> & Gate"
