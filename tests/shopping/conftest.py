import pytest
from protean.integrations.pytest import DomainFixture
from shopping.catalogue import reset_catalogue, set_catalogue
from shopping.catalogue.fake_adapter import FakeCatalogue
from shopping.order_service import reset_order_service, set_order_service
from shopping.order_service.fake_adapter import FakeOrderService


@pytest.fixture(scope="session")
def shopping_bed():
    from shopping.domain import shopping

    bed = DomainFixture(shopping)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(shopping_bed):
    with shopping_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def catalogue():
    """A fresh in-memory catalog for every test."""
    fake = FakeCatalogue()
    set_catalogue(fake)
    yield fake
    reset_catalogue()


@pytest.fixture(autouse=True)
def order_service():
    fake = FakeOrderService()
    set_order_service(fake)
    yield fake
    reset_order_service()
