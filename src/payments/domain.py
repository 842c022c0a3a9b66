"""Payments bounded context — QR-code payment processing.

Handles the payment lifecycle for orders and the gateway abstraction used
to request a scannable payment from the external provider.
"""

from protean.domain import Domain
from shared.logging import configure_logging

configure_logging()

payments = Domain(name="payments")
