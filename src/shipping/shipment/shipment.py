"""Shipment aggregate (CQRS) — the core of the shipping domain.

State Machine:
    (unset) → CREATED        activate()
    SHIPPED → DELIVERED      deliver()

HANDLED and CANCELLED are valid states but no transition produces them.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import Identifier, String, Text

from shipping.domain import shipping
from shipping.shipment.errors import (
    InvalidDestination,
    InvalidOrigin,
    InvalidStateForDeliver,
    ShipmentAlreadyCreated,
    ShipmentAlreadyDelivered,
)
from shipping.shipment.events import ShipmentCreated, ShipmentDelivered


class ShipmentState(Enum):
    CREATED = "Created"
    HANDLED = "Handled"
    SHIPPED = "Shipped"
    CANCELLED = "Cancelled"
    DELIVERED = "Delivered"


@shipping.aggregate
class Shipment:
    shipment_id = Identifier(identifier=True)
    state = String(max_length=20, choices=ShipmentState)
    origin = Text(required=True, sanitize=False)
    destination = Text(required=True, sanitize=False)

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, shipment_id, origin: str, destination: str):
        """Build a shipment that has not been activated yet."""
        if not origin:
            raise InvalidOrigin()
        if not destination:
            raise InvalidDestination()

        return cls(shipment_id=shipment_id, origin=origin, destination=destination)

    # -------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------
    def activate(self) -> None:
        """Move a fresh shipment into the Created state. Allowed only once."""
        if self.state:
            raise ShipmentAlreadyCreated()

        self.state = ShipmentState.CREATED.value
        self.raise_(
            ShipmentCreated(
                shipment_id=str(self.shipment_id),
                origin=self.origin,
                destination=self.destination,
                created_at=datetime.now(UTC),
            )
        )

    def deliver(self) -> None:
        """Record delivery of a shipped shipment."""
        if self.state == ShipmentState.DELIVERED.value:
            raise ShipmentAlreadyDelivered()
        if self.state != ShipmentState.SHIPPED.value:
            raise InvalidStateForDeliver()

        self.state = ShipmentState.DELIVERED.value
        self.raise_(
            ShipmentDelivered(
                shipment_id=str(self.shipment_id),
                delivered_at=datetime.now(UTC),
            )
        )


def is_absent(shipment: Shipment | None) -> bool:
    """True when a lookup found nothing.

    Lookups return None for unknown identifiers, and in practice only None
    occurs: the aggregate cannot be built with an empty route. Any record with
    every field blank, such as one handed back by a foreign store, is also
    treated as absent.
    """
    if shipment is None:
        return True
    return not (shipment.shipment_id or shipment.state or shipment.origin or shipment.destination)
