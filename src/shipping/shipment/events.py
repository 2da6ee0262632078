"""Shipment domain events — immutable facts about shipment state changes."""

from protean.fields import DateTime, Identifier, Text

from shipping.domain import shipping


@shipping.event(part_of="Shipment")
class ShipmentCreated:
    """A shipment was activated and entered the Created state."""

    shipment_id = Identifier(required=True)
    origin = Text(required=True, sanitize=False)
    destination = Text(required=True, sanitize=False)
    created_at = DateTime(required=True)


@shipping.event(part_of="Shipment")
class ShipmentDelivered:
    """A shipped shipment was delivered."""

    shipment_id = Identifier(required=True)
    delivered_at = DateTime(required=True)
