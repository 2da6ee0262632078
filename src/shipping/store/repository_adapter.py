"""Repository adapter — shipment storage backed by the domain's repository."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from shipping.shipment.shipment import Shipment
from shipping.store.port import ShipmentLookup


class ShipmentRepositoryStore(ShipmentLookup):
    """Reads and writes shipments through `current_domain.repository_for(Shipment)`.

    Must be used inside an active domain context.
    """

    def get_by_id(self, shipment_id) -> Shipment | None:
        try:
            return current_domain.repository_for(Shipment).get(str(shipment_id))
        except ObjectNotFoundError:
            return None

    def save(self, shipment: Shipment) -> None:
        current_domain.repository_for(Shipment).add(shipment)
