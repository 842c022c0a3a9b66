"""Order aggregate — the core of the ordering domain.

An Order is opened in PENDING state, collects line items and an optional
discount while pending, and then moves strictly forward through the kitchen
workflow once its payment is confirmed.

State Machine:
    PENDING → RECEIVED → IN_PREPARATION → READY → DELIVERED
    PENDING → CANCELLED

Amounts are derived on every read from the current items and discount;
nothing monetary is stored on the aggregate except the discount itself.
"""

from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String
from shared.errors import (
    ORDER_CANNOT_ADD_ITEM,
    ORDER_CANNOT_APPLY_DISCOUNT,
    ORDER_CANNOT_CANCEL,
    ORDER_CANNOT_DELIVER,
    ORDER_CANNOT_PREPARE,
    ORDER_CANNOT_READY,
    ORDER_CANNOT_RECEIVE,
    ORDER_CANNOT_REMOVE_ITEM,
    ORDER_DISCOUNT_EXCEEDS_SUBTOTAL,
    ORDER_INVALID_DISCOUNT,
    ORDER_INVALID_ITEMS,
    ORDER_INVALID_UNIT_PRICE,
    ORDER_ITEM_NOT_FOUND,
    BusinessRuleViolation,
)

from ordering.domain import ordering
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

CENTS = Decimal("0.01")
_ITEM_KEYS = {"product_id", "quantity", "unit_price"}


def to_money(value) -> Decimal:
    """Exact decimal for a stored price, built from its shortest text form."""
    return Decimal(str(value or 0))


def _round_cents(value: Decimal) -> float:
    return float(value.quantize(CENTS, rounding=ROUND_HALF_UP))


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "Pending"
    RECEIVED = "Received"
    IN_PREPARATION = "InPreparation"
    READY = "Ready"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


# Each forward transition has exactly one source state and its own error code
_TRANSITION_RULES = {
    OrderStatus.RECEIVED: (OrderStatus.PENDING, ORDER_CANNOT_RECEIVE),
    OrderStatus.IN_PREPARATION: (OrderStatus.RECEIVED, ORDER_CANNOT_PREPARE),
    OrderStatus.READY: (OrderStatus.IN_PREPARATION, ORDER_CANNOT_READY),
    OrderStatus.DELIVERED: (OrderStatus.READY, ORDER_CANNOT_DELIVER),
    OrderStatus.CANCELLED: (OrderStatus.PENDING, ORDER_CANNOT_CANCEL),
}


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderItem:
    """A line item on an order.

    The unit price is a snapshot of the catalogue price at the time the item
    was added, so later menu price changes never alter an existing order.
    Items are never edited in place; they are removed and re-added.
    """

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)

    @property
    def subtotal(self) -> float:
        return _round_cents(to_money(self.unit_price) * self.quantity)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    customer_id = Identifier()  # Nullable for anonymous counter orders
    items = HasMany(OrderItem)
    discount = Float(default=0.0, min_value=0.0)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.PENDING.value,
    )
    created_at = DateTime()
    updated_at = DateTime()
    received_at = DateTime()
    preparation_started_at = DateTime()
    ready_at = DateTime()
    delivered_at = DateTime()
    cancelled_at = DateTime()

    @invariant.post
    def amount_cannot_be_negative(self):
        if self._subtotal() < to_money(self.discount):
            raise ValidationError({"discount": [ORDER_DISCOUNT_EXCEEDS_SUBTOTAL]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, customer_id=None, items_data=None):
        """Open a new pending order.

        Args:
            customer_id: The customer placing the order, if known.
            items_data: Optional list of dicts with product_id, quantity,
                        unit_price.
        """
        if items_data is None:
            items_data = []
        if not isinstance(items_data, list) or not all(
            isinstance(d, dict) and set(d) <= _ITEM_KEYS for d in items_data
        ):
            raise BusinessRuleViolation(ORDER_INVALID_ITEMS, field="items")

        now = datetime.now(UTC)
        order = cls(
            customer_id=customer_id,
            items=[cls._new_item(**item_data) for item_data in items_data],
            status=OrderStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderCreated(
                order_id=str(order.id),
                customer_id=str(customer_id) if customer_id else None,
                item_count=len(order.items),
                amount=order.amount,
                created_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Derived amounts
    # -------------------------------------------------------------------
    def _subtotal(self) -> Decimal:
        return sum(
            (to_money(item.unit_price) * item.quantity for item in (self.items or [])),
            Decimal("0"),
        )

    @property
    def subtotal(self) -> float:
        """Sum of quantity × unit price over all items."""
        return _round_cents(self._subtotal())

    @property
    def amount(self) -> float:
        """Amount due: subtotal minus discount, recomputed on every read."""
        return _round_cents(self._subtotal() - to_money(self.discount))

    # -------------------------------------------------------------------
    # Guards
    # -------------------------------------------------------------------
    @staticmethod
    def _new_item(product_id=None, quantity=None, unit_price=None):
        item = OrderItem(product_id=product_id, quantity=quantity, unit_price=unit_price)
        # Float fields let NaN and infinity through min_value checks
        if not to_money(item.unit_price).is_finite():
            raise BusinessRuleViolation(ORDER_INVALID_UNIT_PRICE, field="unit_price")
        return item

    def _assert_pending(self, code):
        if OrderStatus(self.status) != OrderStatus.PENDING:
            raise BusinessRuleViolation(code)

    def _assert_can_transition(self, target_status):
        required_status, code = _TRANSITION_RULES[target_status]
        if OrderStatus(self.status) != required_status:
            raise BusinessRuleViolation(code)

    # -------------------------------------------------------------------
    # Item and discount management (only in PENDING state)
    # -------------------------------------------------------------------
    def add_item(self, product_id, quantity, unit_price):
        """Add a line item. Returns the new item."""
        self._assert_pending(ORDER_CANNOT_ADD_ITEM)

        item = self._new_item(product_id=product_id, quantity=quantity, unit_price=unit_price)
        self.add_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ItemAdded(
                order_id=str(self.id),
                item_id=str(item.id),
                product_id=str(product_id),
                quantity=quantity,
                unit_price=unit_price,
                new_amount=self.amount,
            )
        )
        return item

    def remove_item(self, item_id):
        """Remove a line item by id."""
        self._assert_pending(ORDER_CANNOT_REMOVE_ITEM)

        item = next((i for i in self.items if str(i.id) == str(item_id)), None)
        if item is None:
            raise BusinessRuleViolation(ORDER_ITEM_NOT_FOUND, field="item_id")

        remaining = self._subtotal() - to_money(item.unit_price) * item.quantity
        if remaining < to_money(self.discount):
            raise BusinessRuleViolation(ORDER_DISCOUNT_EXCEEDS_SUBTOTAL, field="discount")

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ItemRemoved(
                order_id=str(self.id),
                item_id=str(item_id),
                new_amount=self.amount,
            )
        )

    def apply_discount(self, discount):
        """Set the order discount, replacing any previous one."""
        self._assert_pending(ORDER_CANNOT_APPLY_DISCOUNT)

        if discount is None or not to_money(discount).is_finite() or to_money(discount) < 0:
            raise BusinessRuleViolation(ORDER_INVALID_DISCOUNT, field="discount")
        if to_money(discount) > self._subtotal():
            raise BusinessRuleViolation(ORDER_DISCOUNT_EXCEEDS_SUBTOTAL, field="discount")

        self.discount = discount
        self.updated_at = datetime.now(UTC)

        self.raise_(
            DiscountApplied(
                order_id=str(self.id),
                discount=discount,
                new_amount=self.amount,
            )
        )

    # -------------------------------------------------------------------
    # Order lifecycle transitions
    # -------------------------------------------------------------------
    def cancel(self):
        """Cancel a pending order."""
        self._assert_can_transition(OrderStatus.CANCELLED)
        now = datetime.now(UTC)
        self.status = OrderStatus.CANCELLED.value
        self.cancelled_at = now
        self.updated_at = now

        self.raise_(OrderCancelled(order_id=str(self.id), cancelled_at=now))

    def receive(self):
        """Accept the order into the kitchen queue (payment confirmed)."""
        self._assert_can_transition(OrderStatus.RECEIVED)
        now = datetime.now(UTC)
        self.status = OrderStatus.RECEIVED.value
        self.received_at = now
        self.updated_at = now

        self.raise_(
            OrderReceived(
                order_id=str(self.id),
                amount=self.amount,
                received_at=now,
            )
        )

    def prepare(self):
        """Start preparing the order."""
        self._assert_can_transition(OrderStatus.IN_PREPARATION)
        now = datetime.now(UTC)
        self.status = OrderStatus.IN_PREPARATION.value
        self.preparation_started_at = now
        self.updated_at = now

        self.raise_(OrderPreparationStarted(order_id=str(self.id), started_at=now))

    def mark_ready(self):
        """Mark the order ready for pickup."""
        self._assert_can_transition(OrderStatus.READY)
        now = datetime.now(UTC)
        self.status = OrderStatus.READY.value
        self.ready_at = now
        self.updated_at = now

        self.raise_(OrderReady(order_id=str(self.id), ready_at=now))

    def deliver(self):
        """Hand the order to the customer."""
        self._assert_can_transition(OrderStatus.DELIVERED)
        now = datetime.now(UTC)
        self.status = OrderStatus.DELIVERED.value
        self.delivered_at = now
        self.updated_at = now

        self.raise_(
            OrderDelivered(
                order_id=str(self.id),
                customer_id=str(self.customer_id) if self.customer_id else None,
                delivered_at=now,
            )
        )
