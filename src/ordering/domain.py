"""Ordering bounded context — restaurant Order management.

Handles the order lifecycle from a pending ticket at the counter through
reception, kitchen preparation, pickup readiness, and delivery to the
customer.
"""

from protean.domain import Domain
from shared.logging import configure_logging

configure_logging()

ordering = Domain(name="ordering")
