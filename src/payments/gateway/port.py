"""Payment gateway port (abstract interface).

Defines the contract that all payment gateway adapters must implement.
Only the resulting (reference, artifact) pair matters to the domain; the
provider's wire protocol stays inside the adapter.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class GatewayError(Exception):
    """The payment provider could not be reached or refused the request."""


@dataclass(frozen=True)
class QrCodePaymentResult:
    """A payment opened at the provider: its reference and a scannable QR payload."""

    qr_code_id: str
    qr_code_data: str


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    def create_qr_code_payment(
        self,
        order_id: str,
        amount: float,
        title: str,
    ) -> QrCodePaymentResult:
        """Open a QR-code payment for an order at the provider."""
        ...
