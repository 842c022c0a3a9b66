"""Order cancellation — command and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain
from shared.errors import ORDER_NOT_FOUND, get_or_raise

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class CancelOrder:
    order_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class CancelOrderHandler:
    @handle(CancelOrder)
    def cancel_order(self, command):
        repo = current_domain.repository_for(Order)
        order = get_or_raise(repo, command.order_id, ORDER_NOT_FOUND)
        order.cancel()
        repo.add(order)
