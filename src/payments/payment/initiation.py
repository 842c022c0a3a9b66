"""Payment initiation — command and handler.

Asks the gateway to open a QR-code payment for an order and records the
resulting Payment aggregate. The caller passes the order amount; the
Payments domain never loads the Order itself.
"""

import structlog
from protean import handle
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from payments.domain import payments
from payments.gateway import get_gateway
from payments.payment.payment import Payment, PaymentType

logger = structlog.get_logger(__name__)


@payments.command(part_of="Payment")
class InitiatePayment:
    """Initiate a new QR-code payment for an order."""

    order_id = Identifier(required=True)
    amount = Float(required=True, min_value=0.0)
    title = String(max_length=255)


@payments.command_handler(part_of=Payment)
class InitiatePaymentHandler:
    @handle(InitiatePayment)
    def initiate_payment(self, command):
        gateway = get_gateway()

        result = gateway.create_qr_code_payment(
            order_id=str(command.order_id),
            amount=command.amount,
            title=command.title or f"Order {command.order_id}",
        )

        payment = Payment.create(
            order_id=command.order_id,
            amount=command.amount,
            provider_reference=result.qr_code_id,
            qr_code_data=result.qr_code_data,
            payment_type=PaymentType.QR_CODE.value,
        )
        current_domain.repository_for(Payment).add(payment)

        logger.info(
            "Payment initiated",
            payment_id=str(payment.id),
            order_id=str(command.order_id),
            gateway=type(gateway).__name__,
        )
        return str(payment.id)
