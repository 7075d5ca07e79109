"""Order administration — note, internal status flag and deletion.

None of these touch the public lifecycle.
"""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import InternalOrderStatus, Order


@ordering.command(part_of="Order")
class UpdateOrderNote:
    order_id = Identifier(required=True)
    note = Text()


@ordering.command(part_of="Order")
class ChangeOrderInternalStatus:
    order_id = Identifier(required=True)
    internal_status = String(required=True, choices=InternalOrderStatus)


@ordering.command(part_of="Order")
class DeleteOrder:
    order_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class ManageOrderHandler:
    @handle(UpdateOrderNote)
    def update_note(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.update_note(command.note)
        repo.add(order)

    @handle(ChangeOrderInternalStatus)
    def change_internal_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.change_internal_status(InternalOrderStatus(command.internal_status))
        repo.add(order)

    @handle(DeleteOrder)
    def delete_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        repo._dao.delete(order)
