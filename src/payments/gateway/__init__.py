"""Selection of the QR-code payment provider.

The provider is chosen by name from the ``PAYMENT_GATEWAY`` environment
variable the first time a gateway is needed. Only the in-process ``fake``
provider ships with this package; tests swap in their own instance with
``set_gateway``.
"""

import os

from payments.gateway.fake_adapter import FakeGateway
from payments.gateway.port import PaymentGateway

DEFAULT_PROVIDER = "fake"

PROVIDERS: dict[str, type[PaymentGateway]] = {
    "fake": FakeGateway,
}

_active: PaymentGateway | None = None


def build_gateway(provider: str) -> PaymentGateway:
    """Instantiate the gateway registered under ``provider``."""
    try:
        gateway_class = PROVIDERS[provider.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown payment gateway provider: {provider}") from None
    return gateway_class()


def gateway_from_environment() -> PaymentGateway:
    return build_gateway(os.getenv("PAYMENT_GATEWAY") or DEFAULT_PROVIDER)


def get_gateway() -> PaymentGateway:
    global _active
    if _active is None:
        _active = gateway_from_environment()
    return _active


def set_gateway(gateway: PaymentGateway) -> None:
    global _active
    _active = gateway


def reset_gateway() -> None:
    """Forget the active gateway so the next lookup reads the environment again."""
    global _active
    _active = None
