"""Payment settlement — commands and handler.

Applies the provider's asynchronous outcome to a Payment. Confirmation is
the trigger for the Ordering domain to receive the order (via the
PaymentConfirmed event); failure leaves the order pending.
"""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain
from shared.errors import PAYMENT_NOT_FOUND, get_or_raise

from payments.domain import payments
from payments.payment.payment import Payment


@payments.command(part_of="Payment")
class ConfirmPayment:
    """Confirm a pending payment."""

    payment_id = Identifier(required=True)


@payments.command(part_of="Payment")
class FailPayment:
    """Mark a pending payment as failed."""

    payment_id = Identifier(required=True)
    reason = String(max_length=500, default="Unknown failure")


@payments.command_handler(part_of=Payment)
class SettlePaymentHandler:
    @handle(ConfirmPayment)
    def confirm_payment(self, command):
        repo = current_domain.repository_for(Payment)
        payment = get_or_raise(repo, command.payment_id, PAYMENT_NOT_FOUND)
        payment.confirm()
        repo.add(payment)

    @handle(FailPayment)
    def fail_payment(self, command):
        repo = current_domain.repository_for(Payment)
        payment = get_or_raise(repo, command.payment_id, PAYMENT_NOT_FOUND)
        payment.fail(reason=command.reason or "Unknown failure")
        repo.add(payment)
