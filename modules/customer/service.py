"""
Customer Module - Service Layer
=================================
Profile changes: saved addresses and payment methods.
Every change is a whole-record replace through IdentityStore.update_user.
"""

from typing import Optional

from common.exceptions import NoActiveUserError, ValidationError
from common.helpers import generate_id, is_blank, last4, mask_number
from modules.auth.service import IdentityStore
from modules.customer.address_models import Address
from modules.customer.models import CreditCard, CheckingAccount, PaymentMethod
from modules.user.models import User


def _require(**fields):
    missing = [name for name, value in fields.items() if is_blank(value)]
    if missing:
        raise ValidationError(f"Required: {', '.join(missing)}")


def describe_payment_method(pm: PaymentMethod) -> str:
    """Display text for a saved payment method."""
    if isinstance(pm, CreditCard):
        return f"Credit Card ending in {pm.last4} (expires {pm.expiry})"
    if isinstance(pm, CheckingAccount):
        return f"Checking Account ending in {pm.account_last4}, routing {mask_number(pm.routing_number)}"
    raise TypeError(f"Unknown payment method: {type(pm).__name__}")


class CustomerService:

    def __init__(self, identity: IdentityStore):
        self.identity = identity

    def add_address(
        self, active: Optional[User],
        street: str, city: str, state: str, zip: str, country: str = "USA",
    ) -> User:
        _require(street=street, city=city, state=state, zip=zip)
        address = Address(
            id=generate_id("addr"),
            street=street.strip(),
            city=city.strip(),
            state=state.strip(),
            zip=zip.strip(),
            country=(country or "USA").strip(),
        )
        return self._append(active, addresses=[address])

    def add_credit_card(self, active: Optional[User], card_number: str, expiry: str) -> User:
        _require(card_number=card_number, expiry=expiry)
        digits = last4(card_number)
        if len(digits) < 4:
            raise ValidationError("Card number must have at least 4 digits.")
        card = CreditCard(id=generate_id("pm"), last4=digits, expiry=expiry.strip())
        return self._append(active, payment_methods=[card])

    def add_checking_account(self, active: Optional[User], account_number: str, routing_number: str) -> User:
        _require(account_number=account_number, routing_number=routing_number)
        digits = last4(account_number)
        if len(digits) < 4:
            raise ValidationError("Account number must have at least 4 digits.")
        account = CheckingAccount(
            id=generate_id("pm"), account_last4=digits, routing_number=routing_number.strip(),
        )
        return self._append(active, payment_methods=[account])

    # ==========================================
    # Private helpers
    # ==========================================

    def _append(self, active: Optional[User], addresses=(), payment_methods=()) -> User:
        if active is None:
            raise NoActiveUserError()
        updated = active.model_copy(update={
            "addresses": [*active.addresses, *addresses],
            "payment_methods": [*active.payment_methods, *payment_methods],
        })
        return self.identity.update_user(active, updated)
