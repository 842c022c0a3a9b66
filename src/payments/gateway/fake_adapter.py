"""Configurable fake payment gateway for development and testing.

This adapter simulates the QR-code payment provider without any external
calls. It can be configured at runtime to fail, making it useful for:
- Automated tests with predictable outcomes
- Development without real provider credentials
"""

from uuid import uuid4

from payments.gateway.port import GatewayError, PaymentGateway, QrCodePaymentResult


class FakeGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Provider unavailable"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Provider unavailable") -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def create_qr_code_payment(
        self,
        order_id: str,
        amount: float,
        title: str,
    ) -> QrCodePaymentResult:
        call = {
            "method": "create_qr_code_payment",
            "order_id": order_id,
            "amount": amount,
            "title": title,
        }
        self.calls.append(call)

        if not self.should_succeed:
            raise GatewayError(self.failure_reason)

        qr_code_id = f"fake_qr_{uuid4().hex[:12]}"
        return QrCodePaymentResult(
            qr_code_id=qr_code_id,
            qr_code_data=f"fakepay://{qr_code_id}?order={order_id}&amount={amount:.2f}",
        )
