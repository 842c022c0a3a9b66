"""Order modification — commands and handler.

Handles item additions, removals, and discount application.
All modifications are only allowed in PENDING state.
"""

from protean import handle
from protean.fields import Float, Identifier, Integer
from protean.utils.globals import current_domain
from shared.errors import ORDER_NOT_FOUND, get_or_raise

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class AddItem:
    """Add a new line item to an order (only allowed in Pending state)."""

    order_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)


@ordering.command(part_of="Order")
class RemoveItem:
    """Remove a line item from an order (only allowed in Pending state)."""

    order_id = Identifier(required=True)
    item_id = Identifier(required=True)


@ordering.command(part_of="Order")
class ApplyDiscount:
    """Apply a discount to an order (only allowed in Pending state)."""

    order_id = Identifier(required=True)
    discount = Float(required=True)


@ordering.command_handler(part_of=Order)
class ModifyOrderHandler:
    @handle(AddItem)
    def add_item(self, command):
        repo = current_domain.repository_for(Order)
        order = get_or_raise(repo, command.order_id, ORDER_NOT_FOUND)
        item = order.add_item(
            product_id=command.product_id,
            quantity=command.quantity,
            unit_price=command.unit_price,
        )
        repo.add(order)
        return str(item.id)

    @handle(RemoveItem)
    def remove_item(self, command):
        repo = current_domain.repository_for(Order)
        order = get_or_raise(repo, command.order_id, ORDER_NOT_FOUND)
        order.remove_item(item_id=command.item_id)
        repo.add(order)

    @handle(ApplyDiscount)
    def apply_discount(self, command):
        repo = current_domain.repository_for(Order)
        order = get_or_raise(repo, command.order_id, ORDER_NOT_FOUND)
        order.apply_discount(discount=command.discount)
        repo.add(order)
