"""Order reception — command and handler.

An order is received once its payment has been confirmed. The command is
normally issued by PaymentOrderEventHandler, but staff can also receive an
order paid at the counter.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain
from shared.errors import ORDER_NOT_FOUND, get_or_raise

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class ReceiveOrder:
    order_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class ReceiveOrderHandler:
    @handle(ReceiveOrder)
    def receive_order(self, command):
        repo = current_domain.repository_for(Order)
        order = get_or_raise(repo, command.order_id, ORDER_NOT_FOUND)
        order.receive()
        repo.add(order)
