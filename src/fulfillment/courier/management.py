"""Courier administration — registration, detail changes, removal and reads."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from fulfillment.courier.courier import Courier
from fulfillment.delivery.delivery import Delivery
from fulfillment.domain import fulfillment

logger = structlog.get_logger(__name__)


@fulfillment.command(part_of="Courier")
class CreateCourier:
    name = String(required=True, max_length=100)
    email = String(max_length=254)
    phone_number = String(max_length=30)


@fulfillment.command(part_of="Courier")
class UpdateCourier:
    courier_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    email = String(max_length=254)
    phone_number = String(max_length=30)


@fulfillment.command(part_of="Courier")
class DeleteCourier:
    courier_id = Identifier(required=True)


@fulfillment.command_handler(part_of=Courier)
class ManageCourierHandler:
    @handle(CreateCourier)
    def create_courier(self, command):
        courier = Courier.create(name=command.name, email=command.email, phone_number=command.phone_number)
        current_domain.repository_for(Courier).add(courier)
        logger.info("Courier created", courier_id=str(courier.id))
        return str(courier.id)

    @handle(UpdateCourier)
    def update_courier(self, command):
        repo = current_domain.repository_for(Courier)
        courier = repo.get(command.courier_id)
        courier.update_details(name=command.name, email=command.email, phone_number=command.phone_number)
        repo.add(courier)
        logger.info("Courier updated", courier_id=str(command.courier_id))

    @handle(DeleteCourier)
    def delete_courier(self, command):
        repo = current_domain.repository_for(Courier)
        courier = repo.get(command.courier_id)
        if current_domain.repository_for(Delivery).has_open_for_courier(command.courier_id):
            raise ValidationError({"courier_id": ["Courier still has deliveries in progress"]})
        repo._dao.delete(courier)
        logger.info("Courier deleted", courier_id=str(command.courier_id))


def get_courier(courier_id: str) -> Courier:
    return current_domain.repository_for(Courier).get(courier_id)


def find_courier(courier_id: str) -> Courier | None:
    try:
        return get_courier(courier_id)
    except ObjectNotFoundError:
        return None


def list_couriers() -> list[Courier]:
    return current_domain.repository_for(Courier).list_all()
