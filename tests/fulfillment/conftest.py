import pytest
from fulfillment.order_service import reset_order_service, set_order_service
from fulfillment.order_service.fake_adapter import FakeOrderService
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def fulfillment_bed():
    from fulfillment.domain import fulfillment

    bed = DomainFixture(fulfillment)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(fulfillment_bed):
    with fulfillment_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def order_service():
    """A fresh fake Ordering service for every test."""
    fake = FakeOrderService()
    set_order_service(fake)
    yield fake
    reset_order_service()
