"""Shared BDD fixtures and step definitions for the Shipping domain."""

import pytest
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then
from shipping.shipment.events import ShipmentCreated, ShipmentDelivered
from shipping.shipment.shipment import Shipment, ShipmentState

_SHIPMENT_EVENT_CLASSES = {
    "ShipmentCreated": ShipmentCreated,
    "ShipmentDelivered": ShipmentDelivered,
}


@pytest.fixture()
def error():
    """Container for captured errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a new shipment from "{origin}" to "{destination}"'), target_fixture="shipment")
def new_shipment(origin, destination):
    return Shipment.create("shp-bdd-001", origin, destination)


@given(parsers.cfparse('a shipment in "{state}" state'), target_fixture="shipment")
def shipment_in_state(state):
    shipment = Shipment.create("shp-bdd-002", "Buenos Aires", "Cordoba")
    shipment.state = ShipmentState(state).value
    return shipment


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the shipment state is "{state}"'))
def shipment_state_is(shipment, state):
    assert shipment.state == state


@then("the shipment action fails with a validation error")
def shipment_action_fails(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse("a {event_type} event is raised"))
def shipment_event_raised(shipment, event_type):
    event_cls = _SHIPMENT_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in shipment._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in shipment._events]}"
