"""
User Module - User Model
==========================
One account record, keyed by email in the users collection.
Orders are kept most recent first; addresses and payment methods are
append-only.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from modules.customer.address_models import Address
from modules.customer.models import PaymentMethod
from modules.order.models import Order


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    password: Optional[str] = None     # digest; None for external-identity accounts
    orders: List[Order] = Field(default_factory=list)
    addresses: List[Address] = Field(default_factory=list)
    payment_methods: List[PaymentMethod] = Field(default_factory=list)

    @property
    def has_password(self) -> bool:
        return self.password is not None

    def public_dict(self) -> dict:
        """JSON-safe dump without the password digest."""
        return self.model_dump(mode="json", exclude={"password"})

    def __repr__(self):
        return f"<User {self.email}>"


# Typed decoder for the persisted users collection (email -> User)
UserMap = TypeAdapter(Dict[str, User])
