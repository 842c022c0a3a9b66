"""Order fulfillment — commands and handler.

Handles the kitchen pipeline: preparation, pickup readiness, and delivery
to the customer.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain
from shared.errors import ORDER_NOT_FOUND, get_or_raise

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class PrepareOrder:
    """Signal that the kitchen has started preparing the order."""

    order_id = Identifier(required=True)


@ordering.command(part_of="Order")
class MarkOrderReady:
    """Signal that the order is ready for pickup."""

    order_id = Identifier(required=True)


@ordering.command(part_of="Order")
class DeliverOrder:
    """Record that the order was handed to the customer."""

    order_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class OrderFulfillmentHandler:
    @handle(PrepareOrder)
    def prepare_order(self, command):
        repo = current_domain.repository_for(Order)
        order = get_or_raise(repo, command.order_id, ORDER_NOT_FOUND)
        order.prepare()
        repo.add(order)

    @handle(MarkOrderReady)
    def mark_order_ready(self, command):
        repo = current_domain.repository_for(Order)
        order = get_or_raise(repo, command.order_id, ORDER_NOT_FOUND)
        order.mark_ready()
        repo.add(order)

    @handle(DeliverOrder)
    def deliver_order(self, command):
        repo = current_domain.repository_for(Order)
        order = get_or_raise(repo, command.order_id, ORDER_NOT_FOUND)
        order.deliver()
        repo.add(order)
