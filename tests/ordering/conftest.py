import pytest
from ordering.delivery_service import reset_delivery_service, set_delivery_service
from ordering.delivery_service.fake_adapter import FakeDeliveryService
from ordering.payment_service import reset_payment_service, set_payment_service
from ordering.payment_service.fake_adapter import FakePaymentService
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def delivery_service():
    """A fresh fake Fulfillment service for every test."""
    fake = FakeDeliveryService()
    set_delivery_service(fake)
    yield fake
    reset_delivery_service()


@pytest.fixture(autouse=True)
def payment_service():
    fake = FakePaymentService()
    set_payment_service(fake)
    yield fake
    reset_payment_service()
