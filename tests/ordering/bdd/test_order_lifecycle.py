"""BDD tests for order lifecycle."""

from protean.exceptions import ValidationError
from pytest_bdd import scenarios, when

scenarios("features/order_lifecycle.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the order is received")
def receive_order(order, error):
    try:
        order.receive()
    except ValidationError as exc:
        error["exc"] = exc


@when("the order is prepared")
def prepare_order(order, error):
    try:
        order.prepare()
    except ValidationError as exc:
        error["exc"] = exc


@when("the order is marked ready")
def mark_order_ready(order, error):
    try:
        order.mark_ready()
    except ValidationError as exc:
        error["exc"] = exc


@when("the order is delivered")
def deliver_order(order, error):
    try:
        order.deliver()
    except ValidationError as exc:
        error["exc"] = exc


@when("the order is cancelled")
def cancel_order(order, error):
    try:
        order.cancel()
    except ValidationError as exc:
        error["exc"] = exc
