"""Payment aggregate — one payment attempt for an order.

A Payment is created when the gateway hands back a provider reference and a
scannable QR artifact. It is settled exactly once, when the provider reports
the outcome.

State Machine:
    PENDING → CONFIRMED
    PENDING → FAILED

Settlement is idempotent: repeating the outcome that already happened is a
logged no-op, while contradicting it is rejected.
"""

from datetime import UTC, datetime
from enum import Enum

import structlog
from protean.fields import DateTime, Float, Identifier, String, Text
from shared.errors import PAYMENT_CANNOT_CONFIRM, PAYMENT_CANNOT_FAIL, BusinessRuleViolation

from payments.domain import payments
from payments.payment.events import PaymentConfirmed, PaymentFailed, PaymentInitiated

logger = structlog.get_logger(__name__)


class PaymentStatus(Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    FAILED = "Failed"


class PaymentType(Enum):
    QR_CODE = "QrCode"


@payments.aggregate
class Payment:
    order_id = Identifier(required=True)
    payment_type = String(
        max_length=50,
        choices=PaymentType,
        default=PaymentType.QR_CODE.value,
    )
    status = String(
        choices=PaymentStatus,
        default=PaymentStatus.PENDING.value,
    )
    amount = Float(required=True, min_value=0.0)
    provider_reference = String(max_length=255)
    qr_code_data = Text()
    failure_reason = String(max_length=500)
    created_at = DateTime()
    confirmed_at = DateTime()
    failed_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        order_id: str,
        amount: float,
        provider_reference: str,
        qr_code_data: str | None = None,
        payment_type: str = PaymentType.QR_CODE.value,
    ):
        """Record a payment the gateway has just opened for an order."""
        now = datetime.now(UTC)
        payment = cls(
            order_id=order_id,
            amount=amount,
            payment_type=payment_type,
            status=PaymentStatus.PENDING.value,
            provider_reference=provider_reference,
            qr_code_data=qr_code_data,
            created_at=now,
            updated_at=now,
        )
        payment.raise_(
            PaymentInitiated(
                payment_id=str(payment.id),
                order_id=str(order_id),
                amount=amount,
                payment_type=payment_type,
                provider_reference=provider_reference,
                qr_code_data=qr_code_data,
                initiated_at=now,
            )
        )
        return payment

    # -------------------------------------------------------------------
    # Settlement
    # -------------------------------------------------------------------
    def confirm(self) -> None:
        """Record that the provider confirmed the payment."""
        current = PaymentStatus(self.status)
        if current == PaymentStatus.CONFIRMED:
            logger.info(
                "Ignoring repeated payment confirmation",
                payment_id=str(self.id),
                order_id=str(self.order_id),
                confirmed_at=self.confirmed_at.isoformat() if self.confirmed_at else None,
            )
            return
        if current != PaymentStatus.PENDING:
            raise BusinessRuleViolation(PAYMENT_CANNOT_CONFIRM)

        now = datetime.now(UTC)
        self.status = PaymentStatus.CONFIRMED.value
        self.confirmed_at = now
        self.updated_at = now

        self.raise_(
            PaymentConfirmed(
                payment_id=str(self.id),
                order_id=str(self.order_id),
                amount=self.amount,
                provider_reference=self.provider_reference,
                confirmed_at=now,
            )
        )

    def fail(self, reason: str) -> None:
        """Record that the provider rejected the payment."""
        current = PaymentStatus(self.status)
        if current == PaymentStatus.FAILED:
            logger.info(
                "Ignoring repeated payment failure",
                payment_id=str(self.id),
                order_id=str(self.order_id),
                reason=reason,
            )
            return
        if current != PaymentStatus.PENDING:
            raise BusinessRuleViolation(PAYMENT_CANNOT_FAIL)

        now = datetime.now(UTC)
        self.status = PaymentStatus.FAILED.value
        self.failure_reason = reason
        self.failed_at = now
        self.updated_at = now

        self.raise_(
            PaymentFailed(
                payment_id=str(self.id),
                order_id=str(self.order_id),
                reason=reason,
                failed_at=now,
            )
        )
