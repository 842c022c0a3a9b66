"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from ordering.order.events import (
    DiscountApplied,
    ItemAdded,
    ItemRemoved,
    OrderCancelled,
    OrderCreated,
    OrderDelivered,
    OrderPreparationStarted,
    OrderReady,
    OrderReceived,
)
from ordering.order.order import Order
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

# Map event name strings to classes for dynamic lookup in Then steps
_ORDER_EVENT_CLASSES = {
    "OrderCreated": OrderCreated,
    "ItemAdded": ItemAdded,
    "ItemRemoved": ItemRemoved,
    "DiscountApplied": DiscountApplied,
    "OrderCancelled": OrderCancelled,
    "OrderReceived": OrderReceived,
    "OrderPreparationStarted": OrderPreparationStarted,
    "OrderReady": OrderReady,
    "OrderDelivered": OrderDelivered,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a pending order", target_fixture="order")
def pending_order():
    order = Order.create(customer_id="cust-001")
    order._events.clear()
    return order


@given("a pending order with an item", target_fixture="order")
def pending_order_with_item():
    order = Order.create(customer_id="cust-001")
    order.add_item("prod-001", 2, 15.0)
    order._events.clear()
    return order


@given("a received order", target_fixture="order")
def received_order():
    order = Order.create(customer_id="cust-001")
    order.add_item("prod-001", 2, 15.0)
    order.receive()
    order._events.clear()
    return order


@given("a ready order", target_fixture="order")
def ready_order():
    order = Order.create(customer_id="cust-001")
    order.add_item("prod-001", 2, 15.0)
    order.receive()
    order.prepare()
    order.mark_ready()
    order._events.clear()
    return order


@given("a cancelled order", target_fixture="order")
def cancelled_order():
    order = Order.create(customer_id="cust-001")
    order.add_item("prod-001", 2, 15.0)
    order.cancel()
    order._events.clear()
    return order


# ---------------------------------------------------------------------------
# Then steps (shared)
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the error code is "{code}"'))
def error_code_is(error, code):
    assert error["exc"] is not None
    assert error["exc"].code == code


@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(order, status):
    assert order.status == status


@then(parsers.cfparse("the order amount is {amount:f}"))
def order_amount_is(order, amount):
    assert order.amount == amount


@then(parsers.cfparse("the order has {count:d} items"))
def order_has_n_items(order, count):
    assert len(order.items) == count


@then(parsers.cfparse("a {event_type} order event is raised"))
def order_event_raised(order, event_type):
    event_cls = _ORDER_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in order._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in order._events]}"


@then("no order event is raised")
def no_order_event_raised(order):
    assert len(order._events) == 0
