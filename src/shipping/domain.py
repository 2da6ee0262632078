"""Shipping bounded context — shipment creation and delivery.

Handles the shipment lifecycle from activation through delivery. Persistence
and identifier allocation are injected collaborators, see `shipping.store`.
"""

import os

from protean.domain import Domain

from shipping.utils.logging import configure_logging

# Configure logging for the application
configure_logging(log_dir=os.getenv("LOG_DIR", "logs"), log_file_prefix="shipping")

# Domain Composition Root
shipping = Domain(name="shipping")
