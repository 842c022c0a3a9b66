"""Cross-domain event contracts for Payments domain events.

These classes define the event shape for consumption by other domains
(the Ordering domain moves an order forward once its payment is confirmed).
They are registered as external events via domain.register_external_event()
with matching __type__ strings so Protean's stream deserialization works
correctly.

The source-of-truth events are in src/payments/payment/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import DateTime, Float, Identifier, String


class PaymentConfirmed(BaseEvent):
    """The payment provider confirmed the payment for an order."""

    __version__ = "v1"

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    amount = Float(required=True)
    provider_reference = String()
    confirmed_at = DateTime(required=True)


class PaymentFailed(BaseEvent):
    """The payment provider reported that the payment did not go through."""

    __version__ = "v1"

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    reason = String(required=True)
    failed_at = DateTime(required=True)
