"""Shared BDD fixtures and step definitions for the Confirmations domain."""

import pytest
from pytest_bdd import given, parsers, then

from confirmations.delivery.fake_provider import FakeDeliveryError
from confirmations.registration.dispatch import ConfirmationDispatcher


@pytest.fixture()
def messages():
    """Operator messages surfaced during the scenario."""
    return []


@pytest.fixture()
def dispatcher(provider, messages):
    return ConfirmationDispatcher(provider, notify=messages.append)


# ---------------------------------------------------------------------------
# Given steps: provider
# ---------------------------------------------------------------------------
@given("the delivery provider is configured")
def provider_configured(provider):
    provider.configure(configured=True)


@given("the delivery provider is not configured")
def provider_not_configured(provider):
    provider.configure(configured=False)


@given("the provider accepts confirmations")
def provider_accepts(provider):
    provider.configure(should_succeed=True)


@given("the provider refuses confirmations")
def provider_refuses(provider):
    provider.configure(should_succeed=False)


@given("the provider raises while sending")
def provider_raises(provider):
    provider.configure(error=FakeDeliveryError("relay unreachable"))


# ---------------------------------------------------------------------------
# Then steps: provider calls & messages
# ---------------------------------------------------------------------------
@then("the provider is not called")
def provider_not_called(provider):
    assert provider.calls == 0


@then("the provider is called once")
def provider_called_once(provider):
    assert provider.calls == 1


@then(parsers.cfparse('the operator sees "{title}"'))
def operator_sees(messages, title):
    assert [m.title for m in messages] == [title]


@then(parsers.cfparse('the status message mentions "{text}"'))
def status_message_mentions(messages, text):
    assert len(messages) == 1
    assert text in messages[0].description
