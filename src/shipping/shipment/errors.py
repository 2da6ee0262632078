"""Shipment error kinds.

Two layers: the aggregate raises `ShipmentError` subclasses when construction
or a state transition is rejected; the lifecycle orchestrator collapses those
(and collaborator failures) into coarser `ShipmentLifecycleError` subclasses.
Both carry Protean's `messages` dict, keyed by the offending field.
"""

from protean.exceptions import InvalidOperationError, ValidationError


class ShipmentError(ValidationError):
    """Rejected construction or state transition of a Shipment."""

    field = "shipment"
    message = "Invalid shipment"

    def __init__(self, message: str | None = None):
        super().__init__({self.field: [message or self.message]})


class InvalidOrigin(ShipmentError):
    field = "origin"
    message = "Invalid origin"


class InvalidDestination(ShipmentError):
    field = "destination"
    message = "Invalid destination"


class ShipmentAlreadyCreated(ShipmentError):
    field = "state"
    message = "Shipment already has a state"


class InvalidStateForDeliver(ShipmentError):
    field = "state"
    message = "Shipment is not shipped"


class ShipmentAlreadyDelivered(ShipmentError):
    field = "state"
    message = "Shipment is already delivered"


class ShipmentLifecycleError(InvalidOperationError):
    """A create or deliver use case could not be completed."""

    message = "Shipment operation failed"

    def __init__(self, message: str | None = None):
        # InvalidOperationError keeps its payload only in args
        self.messages = {"shipment": [message or self.message]}
        super().__init__(self.messages)


class CouldNotCreateShipment(ShipmentLifecycleError):
    message = "Could not create shipment"


class CouldNotCheckExistingShipment(ShipmentLifecycleError):
    message = "Could not check existing shipment"


class ShipmentAlreadyExists(ShipmentLifecycleError):
    message = "Shipment already exists"


class ShipmentDoesNotExist(ShipmentLifecycleError):
    message = "Shipment does not exist"


class ShipmentCanNotBeDelivered(ShipmentLifecycleError):
    """Delivery was rejected by the state machine.

    The fetched shipment is kept on `shipment` so callers can inspect the
    state it is actually in.
    """

    message = "Shipment can not be delivered"

    def __init__(self, shipment, message: str | None = None):
        super().__init__(message or f"{self.message} from state {shipment.state}")
        self.shipment = shipment
