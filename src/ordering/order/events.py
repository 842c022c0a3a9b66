"""Domain events for the Order aggregate.

All events are versioned, immutable facts representing state changes.
They are dispatched when the Unit of Work commits and used for:
- Updating read models and kitchen displays
- Cross-domain communication (e.g. the Payments domain billing the order)
"""

from protean.fields import DateTime, Float, Identifier, Integer

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderCreated:
    """A new pending order was opened for a customer."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    customer_id = Identifier()
    item_count = Integer(default=0)
    amount = Float(required=True)
    created_at = DateTime(required=True)


@ordering.event(part_of="Order")
class ItemAdded:
    """A line item was added to a pending order."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    unit_price = Float(required=True)
    new_amount = Float(required=True)


@ordering.event(part_of="Order")
class ItemRemoved:
    """A line item was removed from a pending order."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    item_id = Identifier(required=True)
    new_amount = Float(required=True)


@ordering.event(part_of="Order")
class DiscountApplied:
    """A discount was applied to a pending order."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    discount = Float(required=True)
    new_amount = Float(required=True)


@ordering.event(part_of="Order")
class OrderCancelled:
    """A pending order was cancelled before it reached the kitchen."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    cancelled_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderReceived:
    """The order was paid for and accepted by the restaurant."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    amount = Float(required=True)
    received_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderPreparationStarted:
    """The kitchen started preparing the order."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    started_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderReady:
    """The order is ready for pickup."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    ready_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderDelivered:
    """The order was handed to the customer."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    customer_id = Identifier()
    delivered_at = DateTime(required=True)
