"""ShipmentSequence aggregate — allocator of shipment ids.

Ids start at 1 and grow by exactly one per registered shipment. Zero is never
handed out. The sequence is saved in the same unit of work as the shipment it
numbered, so a failed registration leaves the next id untouched.
"""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Integer
from protean.utils.globals import current_domain

from tracking.domain import tracking

SHIPMENT_SEQUENCE_ID = "shipment-sequence"


@tracking.aggregate
class ShipmentSequence:
    next_id = Integer(min_value=1, default=1)

    def allocate(self) -> int:
        shipment_id = self.next_id
        self.next_id = shipment_id + 1
        return shipment_id


def load_sequence() -> ShipmentSequence:
    """Return the stored sequence, or a fresh one starting at 1."""
    try:
        return current_domain.repository_for(ShipmentSequence).get(SHIPMENT_SEQUENCE_ID)
    except ObjectNotFoundError:
        return ShipmentSequence(id=SHIPMENT_SEQUENCE_ID)
