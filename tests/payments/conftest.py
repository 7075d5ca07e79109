import pytest
from payments.gateway import reset_gateway, set_gateway
from payments.gateway.fake_adapter import FakeGateway
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def payments_bed():
    from payments.domain import payments

    bed = DomainFixture(payments)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(payments_bed):
    with payments_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def gateway():
    fake = FakeGateway()
    set_gateway(fake)
    yield fake
    reset_gateway()
