import pytest

from common.exceptions import NoActiveUserError, ValidationError
from modules.customer.models import CheckingAccount, CreditCard
from modules.customer.service import CustomerService, describe_payment_method
from modules.storage.service import users_key


@pytest.fixture
def customers(identity):
    return CustomerService(identity)


def test_add_address_appends(identity, customers, alice):
    user = customers.add_address(alice, "1 Garden Way", "Leeds", "WY", "82000")
    user = customers.add_address(user, "2 Orchard Rd", "Cody", "WY", "82414", "Canada")
    stored = identity.get_user("alice@example.com")
    assert [a.street for a in stored.addresses] == ["1 Garden Way", "2 Orchard Rd"]
    assert stored.addresses[0].country == "USA"
    assert stored.addresses[1].country == "Canada"
    assert stored.addresses[0].id != stored.addresses[1].id


def test_address_requires_fields(customers, alice):
    with pytest.raises(ValidationError):
        customers.add_address(alice, "", "Leeds", "WY", "82000")


def test_profile_changes_need_a_user(customers):
    with pytest.raises(NoActiveUserError):
        customers.add_address(None, "1 Garden Way", "Leeds", "WY", "82000")


def test_only_last4_of_card_is_stored(identity, storage, customers, alice):
    user = customers.add_credit_card(alice, "4111 1111 1111 1234", "12/29")
    card = user.payment_methods[0]
    assert isinstance(card, CreditCard)
    assert card.last4 == "1234"
    assert "4111" not in storage.get_item(users_key())


def test_checking_account_round_trips_as_its_variant(identity, customers, alice):
    user = customers.add_credit_card(alice, "4111111111111234", "12/29")
    customers.add_checking_account(user, "000123456789", "021000021")
    methods = identity.get_user("alice@example.com").payment_methods
    assert [type(m) for m in methods] == [CreditCard, CheckingAccount]
    assert methods[1].account_last4 == "6789"


def test_short_card_number_rejected(customers, alice):
    with pytest.raises(ValidationError):
        customers.add_credit_card(alice, "12", "12/29")


def test_describe_payment_method():
    card = CreditCard(id="pm-1", last4="1234", expiry="12/29")
    account = CheckingAccount(id="pm-2", account_last4="6789", routing_number="021000021")
    assert describe_payment_method(card) == "Credit Card ending in 1234 (expires 12/29)"
    assert describe_payment_method(account) == "Checking Account ending in 6789, routing •••••0021"
