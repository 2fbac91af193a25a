"""Tests for the ShipmentSequence aggregate — ids start at 1 and never repeat."""

from tracking.shipment.sequence import SHIPMENT_SEQUENCE_ID, ShipmentSequence


class TestAllocate:
    def test_first_id_is_one(self):
        sequence = ShipmentSequence(id=SHIPMENT_SEQUENCE_ID)
        assert sequence.allocate() == 1

    def test_ids_increase_by_one(self):
        sequence = ShipmentSequence(id=SHIPMENT_SEQUENCE_ID)
        assert [sequence.allocate() for _ in range(3)] == [1, 2, 3]
        assert sequence.next_id == 4
