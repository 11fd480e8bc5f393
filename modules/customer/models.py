"""
Customer Module - Payment Method Models
=========================================
PaymentMethod is a tagged union on `type`: a credit card or a checking
account. Only the last four digits of card/account numbers are stored.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class CreditCard(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: Literal["Credit Card"] = "Credit Card"
    last4: str = Field(..., min_length=4, max_length=4)
    expiry: str


class CheckingAccount(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: Literal["Checking Account"] = "Checking Account"
    account_last4: str = Field(..., min_length=4, max_length=4)
    routing_number: str


PaymentMethod = Annotated[Union[CreditCard, CheckingAccount], Field(discriminator="type")]
