"""Delivery creation — command and handler.

The assigned courier must already be registered with Fulfillment.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from fulfillment.courier.management import find_courier
from fulfillment.delivery.delivery import Delivery
from fulfillment.domain import fulfillment

logger = structlog.get_logger(__name__)


@fulfillment.command(part_of="Delivery")
class CreateDelivery:
    """Create the delivery for a placed order."""

    order_id = Identifier(required=True)
    courier_id = Identifier(required=True)
    email = String(required=True, max_length=254)
    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    phone_number = String(required=True, max_length=30)
    street = String(required=True, max_length=200)
    city = String(required=True, max_length=100)
    postal_code = String(required=True, max_length=20)
    state = String(required=True, max_length=100)


@fulfillment.command_handler(part_of=Delivery)
class CreateDeliveryHandler:
    @handle(CreateDelivery)
    def create_delivery(self, command):
        if find_courier(command.courier_id) is None:
            logger.warning(
                "Delivery refused for unknown courier",
                order_id=str(command.order_id),
                courier_id=str(command.courier_id),
            )
            raise ValidationError({"courier_id": ["Unknown courier"]})
        delivery = Delivery.create(
            order_id=command.order_id,
            courier_id=command.courier_id,
            recipient={
                "email": command.email,
                "first_name": command.first_name,
                "last_name": command.last_name,
                "phone_number": command.phone_number,
            },
            address={
                "street": command.street,
                "city": command.city,
                "postal_code": command.postal_code,
                "state": command.state,
            },
        )
        current_domain.repository_for(Delivery).add(delivery)
        return str(delivery.id)
