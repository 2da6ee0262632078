"""Shipment lifecycle — creation and delivery use cases.

The orchestrator owns no storage. It is wired with three collaborators:

    save(shipment)            persist a shipment, raise on failure
    lookup.get_by_id(id)      return the stored shipment or None, raise on failure
    next_id()                 return a fresh, unique shipment identifier

Collaborator and state machine failures are re-raised as the coarse
`ShipmentLifecycleError` kinds, chained to the original exception.
"""

from collections.abc import Callable

from protean.exceptions import ValidationError

from shipping.shipment.errors import (
    CouldNotCheckExistingShipment,
    CouldNotCreateShipment,
    ShipmentAlreadyDelivered,
    ShipmentAlreadyExists,
    ShipmentCanNotBeDelivered,
    ShipmentDoesNotExist,
    ShipmentError,
)
from shipping.shipment.shipment import Shipment, is_absent
from shipping.store.port import ShipmentLookup
from shipping.utils.logging import get_logger

logger = get_logger(__name__)


class ShipmentLifecycle:
    """Create and deliver shipments through injected storage collaborators."""

    def __init__(
        self,
        save: Callable[[Shipment], None],
        lookup: ShipmentLookup,
        next_id: Callable[[], str],
    ):
        self._save = save
        self._lookup = lookup
        self._next_id = next_id

    def create(self, origin: str, destination: str) -> Shipment:
        """Create, activate and persist a new shipment."""
        shipment_id = self._next_id()

        try:
            shipment = Shipment.create(shipment_id, origin, destination)
        except ValidationError as exc:
            logger.warning(
                "Shipment rejected",
                shipment_id=str(shipment_id),
                reason=str(exc.messages),
            )
            raise CouldNotCreateShipment() from exc

        self._ensure_can_create(shipment)
        shipment.activate()

        try:
            self._save(shipment)
        except Exception as exc:
            logger.warning("Shipment could not be saved", shipment_id=str(shipment_id), error=str(exc))
            raise CouldNotCreateShipment() from exc

        logger.info(
            "Shipment created",
            shipment_id=str(shipment_id),
            origin=origin,
            destination=destination,
        )
        return shipment

    def deliver(self, shipment_id: str) -> Shipment:
        """Deliver a stored shipment.

        Delivering an already delivered shipment succeeds. The delivered
        shipment is returned without being saved again.
        """
        shipment = self._fetch(shipment_id)
        if is_absent(shipment):
            logger.warning("Delivery requested for unknown shipment", shipment_id=str(shipment_id))
            raise ShipmentDoesNotExist()

        try:
            shipment.deliver()
        except ShipmentAlreadyDelivered:
            logger.info("Shipment already delivered", shipment_id=str(shipment_id))
            return shipment
        except ShipmentError as exc:
            logger.warning(
                "Shipment can not be delivered",
                shipment_id=str(shipment_id),
                state=shipment.state,
            )
            raise ShipmentCanNotBeDelivered(shipment) from exc

        logger.info("Shipment delivered", shipment_id=str(shipment_id))
        return shipment

    def _ensure_can_create(self, shipment: Shipment) -> None:
        existing = self._fetch(shipment.shipment_id)
        if not is_absent(existing):
            logger.warning("Shipment identifier already in use", shipment_id=str(shipment.shipment_id))
            raise ShipmentAlreadyExists()

    def _fetch(self, shipment_id: str) -> Shipment | None:
        try:
            return self._lookup.get_by_id(shipment_id)
        except Exception as exc:
            logger.warning("Shipment lookup failed", shipment_id=str(shipment_id), error=str(exc))
            raise CouldNotCheckExistingShipment() from exc
