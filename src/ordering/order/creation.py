"""Order creation — command and handler."""

import json

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain
from shared.errors import ORDER_INVALID_ITEMS, BusinessRuleViolation

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class CreateOrder:
    customer_id = Identifier()
    items = Text()  # JSON: list of {product_id, quantity, unit_price}


@ordering.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        try:
            items_data = json.loads(command.items) if isinstance(command.items, str) else command.items
        except json.JSONDecodeError as exc:
            raise BusinessRuleViolation(ORDER_INVALID_ITEMS, field="items") from exc

        order = Order.create(
            customer_id=command.customer_id,
            items_data=items_data,
        )
        current_domain.repository_for(Order).add(order)
        return str(order.id)
