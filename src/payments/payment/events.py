"""Domain events for the Payment aggregate.

All events are versioned, immutable facts representing payment state changes.
PaymentConfirmed and PaymentFailed are mirrored in shared.events.payments
for consumption by the Ordering domain.
"""

from protean.fields import DateTime, Float, Identifier, String, Text

from payments.domain import payments


@payments.event(part_of="Payment")
class PaymentInitiated:
    """A payment was requested from the gateway for an order."""

    __version__ = "v1"

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    amount = Float(required=True)
    payment_type = String(required=True)
    provider_reference = String(required=True)
    qr_code_data = Text()
    initiated_at = DateTime(required=True)


@payments.event(part_of="Payment")
class PaymentConfirmed:
    """The payment provider confirmed the payment."""

    __version__ = "v1"

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    amount = Float(required=True)
    provider_reference = String()
    confirmed_at = DateTime(required=True)


@payments.event(part_of="Payment")
class PaymentFailed:
    """The payment provider reported a failed payment."""

    __version__ = "v1"

    payment_id = Identifier(required=True)
    order_id = Identifier(required=True)
    reason = String(required=True)
    failed_at = DateTime(required=True)
