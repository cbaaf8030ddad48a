import pytest
from protean.integrations.pytest import DomainFixture

from confirmations.delivery import reset_provider, set_provider
from confirmations.delivery.fake_provider import FakeDeliveryProvider
from confirmations.registration.request import RegistrationForm


@pytest.fixture(scope="session")
def confirmations_bed():
    from confirmations.domain import confirmations

    bed = DomainFixture(confirmations)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(confirmations_bed):
    with confirmations_bed.domain_context():
        yield


@pytest.fixture()
def provider():
    """Fresh fake provider installed as the active binding."""
    fake = FakeDeliveryProvider()
    set_provider(fake)
    yield fake
    reset_provider()


@pytest.fixture()
def form():
    return RegistrationForm(to_email="user@domain.com", to_name="Ama Mensah")
