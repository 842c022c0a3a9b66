"""Shared BDD fixtures and step definitions for the Payments domain."""

import pytest
from payments.payment.events import PaymentConfirmed, PaymentFailed, PaymentInitiated
from payments.payment.payment import Payment
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

# Map event name strings to classes for dynamic lookup
_PAYMENT_EVENT_CLASSES = {
    "PaymentInitiated": PaymentInitiated,
    "PaymentConfirmed": PaymentConfirmed,
    "PaymentFailed": PaymentFailed,
}


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Payment Given steps
# ---------------------------------------------------------------------------
@given("a pending payment", target_fixture="payment")
def pending_payment():
    payment = Payment.create(
        order_id="ord-001",
        amount=42.0,
        provider_reference="fake_qr_abc123",
    )
    payment._events.clear()
    return payment


@given("a confirmed payment", target_fixture="payment")
def confirmed_payment():
    payment = Payment.create(
        order_id="ord-001",
        amount=42.0,
        provider_reference="fake_qr_abc123",
    )
    payment.confirm()
    payment._events.clear()
    return payment


@given("a failed payment", target_fixture="payment")
def failed_payment():
    payment = Payment.create(
        order_id="ord-001",
        amount=42.0,
        provider_reference="fake_qr_abc123",
    )
    payment.fail("Card declined")
    payment._events.clear()
    return payment


# ---------------------------------------------------------------------------
# Then steps (shared)
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the error code is "{code}"'))
def error_code_is(error, code):
    assert error["exc"].code == code


@then(parsers.cfparse('the payment status is "{status}"'))
def payment_status_is(payment, status):
    assert payment.status == status


@then(parsers.cfparse("a {event_type} payment event is raised"))
def payment_event_raised(payment, event_type):
    event_cls = _PAYMENT_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in payment._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in payment._events]}"


@then("no payment event is raised")
def no_payment_event_raised(payment):
    assert len(payment._events) == 0
