"""Shipment lookup port — abstract interface for shipment storage.

The lifecycle orchestrator programs against the port; adapters are swapped
via configuration.
"""

from abc import ABC, abstractmethod


class ShipmentLookup(ABC):
    """Abstract interface for fetching shipments by identifier."""

    @abstractmethod
    def get_by_id(self, shipment_id):
        """Fetch a shipment.

        Returns:
            the stored Shipment, or None when the identifier is unknown.
            Raises only when the store itself fails.
        """
        ...
