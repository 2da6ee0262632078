"""Shipment storage wiring — pluggable lookup, save and identifier sequence."""

import os

_service_instance = None


def _build_sequence():
    strategy = os.environ.get("SHIPMENT_ID_SEQUENCE", "counter")
    if strategy == "counter":
        from shipping.store.sequence import CounterSequence

        return CounterSequence(prefix=os.environ.get("SHIPMENT_ID_PREFIX", "shp-"))
    if strategy == "uuid":
        from shipping.store.sequence import uuid_sequence

        return uuid_sequence
    raise ValueError(f"Unknown shipment id sequence: {strategy}")


def get_shipment_service():
    """Return the configured shipment lifecycle (singleton).

    Uses the domain repository by default. Configure via the SHIPMENT_STORE,
    SHIPMENT_ID_SEQUENCE and SHIPMENT_ID_PREFIX environment variables.
    """
    global _service_instance
    if _service_instance is None:
        adapter = os.environ.get("SHIPMENT_STORE", "repository")
        if adapter == "repository":
            from shipping.store.repository_adapter import ShipmentRepositoryStore

            store = ShipmentRepositoryStore()
        else:
            raise ValueError(f"Unknown shipment store: {adapter}")

        from shipping.shipment.lifecycle import ShipmentLifecycle

        _service_instance = ShipmentLifecycle(save=store.save, lookup=store, next_id=_build_sequence())
    return _service_instance


def reset_shipment_service():
    """Reset the shipment lifecycle singleton (useful for testing)."""
    global _service_instance
    _service_instance = None
