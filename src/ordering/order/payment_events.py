"""Inbound cross-domain event handler — Ordering reacts to Payment events.

Listens for PaymentConfirmed and PaymentFailed events from the Payments
domain. A confirmed payment moves the order from Pending to Received; the
two aggregates only ever reference each other by identifier.

Cross-domain events are imported from shared.events.payments and registered
as external events via ordering.register_external_event().
"""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.events.payments import PaymentConfirmed, PaymentFailed

from ordering.domain import ordering
from ordering.order.order import Order
from ordering.order.reception import ReceiveOrder

logger = structlog.get_logger(__name__)

# Register external events so Protean can deserialize them
ordering.register_external_event(PaymentConfirmed, "Payments.PaymentConfirmed.v1")
ordering.register_external_event(PaymentFailed, "Payments.PaymentFailed.v1")


@ordering.event_handler(part_of=Order, stream_category="payments::payment")
class PaymentOrderEventHandler:
    """Reacts to Payment domain events to update Order status."""

    @handle(PaymentConfirmed)
    def on_payment_confirmed(self, event: PaymentConfirmed) -> None:
        """Receive the order once its payment is confirmed."""
        logger.info(
            "Receiving order after payment confirmation",
            order_id=str(event.order_id),
            payment_id=str(event.payment_id),
        )
        current_domain.process(
            ReceiveOrder(order_id=event.order_id),
            asynchronous=False,
        )

    @handle(PaymentFailed)
    def on_payment_failed(self, event: PaymentFailed) -> None:
        """Log a failed payment.

        The order stays Pending so the customer can retry with a new payment.
        """
        logger.warning(
            "Payment failed for order",
            order_id=str(event.order_id),
            payment_id=str(event.payment_id),
            reason=event.reason,
        )
